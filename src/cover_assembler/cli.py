"""Command-line interface for cover-assembler."""

import argparse
import json
import logging
import sys
from pathlib import Path

from cover_assembler.assemblers import DocumentAssembler, with_cover_filename
from cover_assembler.detectors import detect_pdf_page_size, get_standard_page_size
from cover_assembler.exceptions import TemplateValidationError
from cover_assembler.pipeline import CoverPipeline
from cover_assembler.templates import TemplateRegistry, validate_template
from schemas.paper import PaperMetadata
from schemas.series import SeriesSettings
from schemas.template_field import TemplateField

DEFAULT_OUTPUT_DIR = Path("./workspace/output")


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )


def _load_paper(path: Path) -> PaperMetadata:
    return PaperMetadata.model_validate(json.loads(path.read_text()))


def _load_series(path: Path) -> SeriesSettings:
    return SeriesSettings.model_validate(json.loads(path.read_text()))


def _load_fields(path: Path) -> dict[str, TemplateField]:
    data = json.loads(path.read_text())
    return {
        field_id: TemplateField.model_validate({"id": field_id, **field})
        for field_id, field in data.items()
    }


def _log_validation_errors(logger: logging.Logger, errors: list[str]) -> None:
    logger.error(f"Template is invalid ({len(errors)} errors)")
    for error in errors:
        logger.error(f"  - {error}")


def detect_size(args: argparse.Namespace) -> int:
    """Execute the detect-size command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    pdf_path = args.pdf.resolve()
    if not pdf_path.exists():
        logger.error(f"PDF not found: {pdf_path}")
        return 1

    page_size = detect_pdf_page_size(pdf_path)
    logger.info(f"Page size: {page_size.display_name}")
    logger.info(f"  Width: {page_size.width:g} pt")
    logger.info(f"  Height: {page_size.height:g} pt")
    return 0


def validate(args: argparse.Namespace) -> int:
    """Execute the validate-template command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 when the template is valid, 1 otherwise)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    template_path = args.template.resolve()
    if not template_path.exists():
        logger.error(f"Template not found: {template_path}")
        return 1

    result = validate_template(template_path.read_text())
    if not result.valid:
        _log_validation_errors(logger, result.errors)
        return 1

    logger.info(f"Template is valid: {template_path}")
    return 0


def render_cover(args: argparse.Namespace) -> int:
    """Execute the render-cover command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    try:
        paper = _load_paper(args.paper)
        series = _load_series(args.series)
        pipeline = CoverPipeline()

        if args.template:
            markup = args.template.read_text()
        elif args.preset:
            markup = pipeline.registry.get(args.preset)
        else:
            markup = pipeline.registry.resolve(series.cover_page_settings)

        page_size = get_standard_page_size(args.page_size)
        cover = pipeline.create_cover_page(markup, paper, series, page_size)

        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_bytes(cover)

        logger.info(f"Rendered cover page: {args.output}")
        logger.info(f"  Page size: {page_size.display_name}")
        return 0

    except TemplateValidationError as e:
        _log_validation_errors(logger, e.errors)
        return 1
    except Exception as e:
        logger.error(f"Failed to render cover page: {e}")
        return 1


def merge(args: argparse.Namespace) -> int:
    """Execute the merge command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    for label, path in (("Cover", args.cover), ("Manuscript", args.manuscript)):
        if not path.exists():
            logger.error(f"{label} PDF not found: {path.resolve()}")
            return 1

    output = args.output or args.manuscript.with_name(
        with_cover_filename(args.manuscript.name)
    )

    try:
        merged = DocumentAssembler().merge(args.cover.read_bytes(), args.manuscript)
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_bytes(merged)

        logger.info(f"Merged PDF: {output}")
        return 0

    except Exception as e:
        logger.error(f"Failed to merge PDFs: {e}")
        return 1


def assemble(args: argparse.Namespace) -> int:
    """Execute the assemble command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    manuscript_path = args.manuscript.resolve()
    if not manuscript_path.exists():
        logger.error(f"Manuscript not found: {manuscript_path}")
        return 1

    if bool(args.fields) != bool(args.base_pdf):
        logger.error("--fields and --base-pdf must be given together")
        return 1

    output_dir = args.output_dir
    output_dir.mkdir(parents=True, exist_ok=True)

    try:
        paper = _load_paper(args.paper)
        series = _load_series(args.series)
        pipeline = CoverPipeline(
            registry=TemplateRegistry.load(args.templates_dir) if args.templates_dir else None,
        )

        if args.fields:
            document = pipeline.process_with_fields(
                manuscript_path,
                manuscript_path.name,
                paper,
                series,
                base_pdf=args.base_pdf.read_bytes(),
                fields=_load_fields(args.fields),
            )
        else:
            template = args.template.read_text() if args.template else None
            document = pipeline.process(
                manuscript_path,
                manuscript_path.name,
                paper,
                series,
                template=template,
            )

        output_path = output_dir / document.filename
        output_path.write_bytes(document.content)

        logger.info(f"Assembled: {document.filename}")
        logger.info(f"  Pages: {document.page_count}")
        logger.info(f"  Output: {output_path}")
        return 0

    except TemplateValidationError as e:
        _log_validation_errors(logger, e.errors)
        return 1
    except Exception as e:
        logger.error(f"Failed to assemble {manuscript_path.name}: {e}")
        return 1


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code
    """
    parser = argparse.ArgumentParser(
        prog="cover-assembler",
        description="Generate working paper cover pages and prepend them to manuscripts",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output",
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
    )

    detect_parser = subparsers.add_parser(
        "detect-size",
        help="Detect the page size of a PDF",
        description="Read the first page of a PDF and classify its size (A4, Letter, ...).",
    )
    detect_parser.add_argument(
        "--pdf",
        type=Path,
        required=True,
        help="Path to the PDF to inspect",
    )
    detect_parser.set_defaults(func=detect_size)

    validate_parser = subparsers.add_parser(
        "validate-template",
        help="Validate a cover page HTML template",
        description="Check that a cover page template has HTML structure, styling and placeholders.",
    )
    validate_parser.add_argument(
        "--template",
        type=Path,
        required=True,
        help="Path to the HTML template",
    )
    validate_parser.set_defaults(func=validate)

    render_parser = subparsers.add_parser(
        "render-cover",
        help="Render a cover page PDF",
        description="Fill a cover page template with paper and series metadata and render it to PDF.",
    )
    render_parser.add_argument(
        "--paper",
        type=Path,
        required=True,
        help="Path to a JSON file with paper metadata",
    )
    render_parser.add_argument(
        "--series",
        type=Path,
        required=True,
        help="Path to a JSON file with series settings",
    )
    template_group = render_parser.add_mutually_exclusive_group()
    template_group.add_argument(
        "--template",
        type=Path,
        help="Path to a custom HTML template",
    )
    template_group.add_argument(
        "--preset",
        type=str,
        help="Name of a preset template (academic, minimal, formal, custom)",
    )
    render_parser.add_argument(
        "--page-size",
        type=str,
        default="A4",
        help="Standard page size name (default: A4)",
    )
    render_parser.add_argument(
        "--output",
        type=Path,
        required=True,
        help="Path of the cover page PDF to write",
    )
    render_parser.set_defaults(func=render_cover)

    merge_parser = subparsers.add_parser(
        "merge",
        help="Prepend a cover page to a manuscript",
        description="Merge the first page of a cover PDF with every page of a manuscript PDF.",
    )
    merge_parser.add_argument(
        "--cover",
        type=Path,
        required=True,
        help="Path to the cover page PDF",
    )
    merge_parser.add_argument(
        "--manuscript",
        type=Path,
        required=True,
        help="Path to the manuscript PDF",
    )
    merge_parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Path of the merged PDF (default: <manuscript>_with_cover.pdf)",
    )
    merge_parser.set_defaults(func=merge)

    assemble_parser = subparsers.add_parser(
        "assemble",
        help="Run the full pipeline for one manuscript",
        description="Detect the manuscript page size, render its cover page and prepend it to the manuscript.",
    )
    assemble_parser.add_argument(
        "--manuscript",
        type=Path,
        required=True,
        help="Path to the manuscript PDF",
    )
    assemble_parser.add_argument(
        "--paper",
        type=Path,
        required=True,
        help="Path to a JSON file with paper metadata",
    )
    assemble_parser.add_argument(
        "--series",
        type=Path,
        required=True,
        help="Path to a JSON file with series settings",
    )
    assemble_parser.add_argument(
        "--template",
        type=Path,
        default=None,
        help="Path to a custom HTML template (default: from series settings)",
    )
    assemble_parser.add_argument(
        "--templates-dir",
        type=Path,
        default=None,
        help="Directory of preset templates (default: resources/templates)",
    )
    assemble_parser.add_argument(
        "--fields",
        type=Path,
        default=None,
        help="Path to a JSON field map for a field-based cover page",
    )
    assemble_parser.add_argument(
        "--base-pdf",
        type=Path,
        default=None,
        help="Base page PDF for a field-based cover page",
    )
    assemble_parser.add_argument(
        "--output-dir",
        type=Path,
        default=DEFAULT_OUTPUT_DIR,
        help=f"Output directory (default: {DEFAULT_OUTPUT_DIR})",
    )
    assemble_parser.set_defaults(func=assemble)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
