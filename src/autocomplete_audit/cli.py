"""Command line interface for the autocomplete audit."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional, Sequence

from .audits.autocomplete import audit_autocomplete
from .core.artifacts import AuditVerdict, FormElementsArtifact
from .core.config import AuditConfig, load_configuration
from .core.errors import AuditError, PageLoadError
from .recon.forms import FormElementsCollector
from .recon.loader import fetch_static_html, render_page_html

EXIT_PASSED = 0
EXIT_FAILED = 1
EXIT_ERROR = 2


def parse_arguments(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Auditoria do atributo autocomplete")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("-u", "--url", help="URL da página alvo")
    source.add_argument("--html", help="Arquivo HTML local a ser auditado")
    source.add_argument("--forms", help="Arquivo JSON com os formulários já extraídos")
    parser.add_argument("--render", action="store_true", default=None, help="Renderiza a página com o Playwright")
    parser.add_argument("--locale", default=None, help="Idioma das mensagens (ex.: en-US, pt-BR)")
    parser.add_argument("--timeout", type=int, default=None, help="Tempo máximo (s) para carregar a página")
    parser.add_argument("--report", default=None, help="Arquivo de saída do veredito (JSON)")
    parser.add_argument("--save-forms", default=None, help="Salva os formulários extraídos em JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="Exibe logs de depuração")
    return parser.parse_args(argv)


def read_html_file(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise PageLoadError(f"{path} is not UTF-8 text: {exc}") from exc


def gather_forms(args: argparse.Namespace, config: AuditConfig) -> FormElementsArtifact:
    """Resolves the form records from whichever source the user selected."""

    if args.forms:
        print(f"[*] Lendo formulários de {args.forms}")
        return FormElementsArtifact.load(Path(args.forms))

    collector = FormElementsCollector()
    if args.html:
        print(f"[*] Lendo HTML de {args.html}")
        html = read_html_file(Path(args.html))
        return FormElementsArtifact.from_forms(collector.collect_from_html(html), source=args.html)

    target = config.target_url or ""
    if config.render:
        print("[+] Renderizando a página com o Playwright.")
        html = render_page_html(config)
    else:
        print("[+] Baixando o HTML estático da página.")
        html = fetch_static_html(target, session_cookie=config.session_cookie, timeout=config.timeout)
    return FormElementsArtifact.from_forms(collector.collect_from_html(html), source=target)


def print_verdict(verdict: AuditVerdict) -> None:
    print(f"\n=== {verdict.title} ===")
    items: List[dict] = verdict.items
    if items:
        for item in items:
            node = item["node"]
            print(f" - {node['nodeLabel']} :: {node['snippet']}")
        print(f"[!] {verdict.display_value}")
    else:
        print(" - Todos os campos possuem autocomplete válido.")


def run_cli(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_arguments(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        config = load_configuration(
            args.url,
            args.report,
            render=args.render,
            locale=args.locale,
            timeout=args.timeout,
        )
        artifact = gather_forms(args, config)
    except (AuditError, OSError) as exc:
        print(f"[!] {exc}")
        return EXIT_ERROR

    print(f"[+] {len(artifact.forms)} formulário(s), {artifact.input_count} campo(s) encontrados.")
    if args.save_forms:
        artifact.save(Path(args.save_forms))
        print(f"[+] Formulários salvos em {args.save_forms}")

    verdict = audit_autocomplete(artifact.forms, locale=config.locale)
    print_verdict(verdict)

    if config.report_path is not None:
        verdict.save(config.report_path)
        print(f"[+] Veredito salvo em {config.report_path}")

    return EXIT_PASSED if verdict.passed else EXIT_FAILED


def main() -> None:
    raise SystemExit(run_cli())


if __name__ == "__main__":
    main()
