"""
Parse a saved .eml file locally and print what the relay would extract,
without sending anything to Telegram.
"""

import json
import logging
from pathlib import Path

import typer

from extractors.forwarded_header_extractor import extract_forwarded_header
from extractors.transaction_extractor import extract_transaction_fields
from orchestrator.email_decoder import decode_email

logger = logging.getLogger(__name__)

app = typer.Typer(name="parse-eml", help="Extract forwarded headers and transaction details from an .eml file", add_completion=False)


@app.command()
def parse(eml_path: Path = typer.Argument(..., help="Path to the .eml file")):
    if not eml_path.exists():
        typer.echo(f"Error: Could not find email file at {eml_path}", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"Reading email from: {eml_path}")
    email = decode_email(eml_path.read_bytes())

    forwarded = extract_forwarded_header(email.text or email.html or "")
    typer.echo("--- Forwarded Headers ---")
    typer.echo(json.dumps(forwarded.model_dump(by_alias=True, exclude_none=True), indent=2))

    extracted = extract_transaction_fields(email.html or email.text or "")
    typer.echo("--- Extracted Data ---")
    typer.echo(json.dumps(extracted.model_dump(by_alias=True), indent=2))


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    app()
