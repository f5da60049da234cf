"""Markdown formatter for the HTTP API reference.

Produces the text blocks of the IPFS website API reference page.
"""

import html
import re
from datetime import date
from pathlib import Path
from string import Template

from http_api_docs.generator.docs import Formatter
from http_api_docs.parser.base import Argument, Endpoint

TEMPLATES_DIR = Path(__file__).parent.parent / "templates"

API_PREFIX = "/api/v0"
ADD_ENDPOINT = "/api/v0/add"
API_ADDRESS = "http://127.0.0.1:5001"

# Strips the "Default: ..." part of descriptions; defaults are rendered separately.
FIX_DESCRIPTION = re.compile(r" Default: [A-Za-z0-9_-]+ ?\.")


class MarkdownFormatter(Formatter):
    """Renders endpoint documentation as Markdown with embedded HTML."""

    def __init__(self, version: str, generated_on: date):
        self.version = version
        self.generated_on = generated_on

    def generate_intro(self) -> str:
        template = Template((TEMPLATES_DIR / "intro.md").read_text(encoding="utf-8"))
        return template.substitute(
            generated_on=self.generated_on.strftime("%Y-%m-%d"),
            version=self.version,
        )

    def generate_index(self, endpoints: list[Endpoint]) -> str:
        lines = ["## Index\n\n"]
        for endpoint in endpoints:
            lines.append(f"  *  [{endpoint.name.removeprefix(API_PREFIX)}](#{anchor(endpoint.name)})\n")
        lines.append("\n\n## Endpoints\n\n")
        return "".join(lines)

    def generate_endpoint_block(self, endpoint: Endpoint) -> str:
        return f"\n## {endpoint.name}\n\n{escape(endpoint.description)}\n\n\n"

    def generate_arguments_block(self, arguments: list[Argument], options: list[Argument]) -> str:
        lines = ["### Arguments\n\n"]

        if not arguments and not options:
            lines.append("This endpoint takes no arguments.\n")

        lines.extend(_gen_argument(arg, alias_to_arg=True) for arg in arguments)
        lines.extend(_gen_argument(opt, alias_to_arg=False) for opt in options)

        lines.append("\n")
        return "".join(lines)

    def generate_body_block(self, arguments: list[Argument]) -> str:
        body_arg = next((arg for arg in arguments if arg.type.is_file), None)
        if body_arg is None:
            return ""

        text = (
            "\n### Request Body\n\n"
            f"Argument `{body_arg.name}` is of file type. This endpoint expects one or several files "
            "(depending on the command) in the body of the request as 'multipart/form-data'.\n\n"
        )
        if body_arg.endpoint == ADD_ENDPOINT:
            text += (TEMPLATES_DIR / "add_body.md").read_text(encoding="utf-8")
        return text

    def generate_response_block(self, response: str) -> str:
        return (
            "\n### Response\n\n"
            "On success, the call to this endpoint will return with 200 and the following body:\n\n"
            f"```json\n{response}\n```\n\n"
        )

    def generate_example_block(self, endpoint: Endpoint) -> str:
        query_args = []
        has_file_arg = False
        for arg in endpoint.arguments:
            if arg.type.is_file:
                has_file_arg = True
            else:
                query_args.append(f"arg=<{arg.name}>")

        for opt in endpoint.options:
            query_args.append(f"{opt.name}={opt.default or '<value>'}")

        command = "curl -X POST "
        if has_file_arg:
            command += "-F file=@myfile "
        command += f'"{API_ADDRESS}{endpoint.name}'
        if query_args:
            command += "?" + "&".join(query_args)
        command += '"'

        return f"### cURL Example\n\n`{command}`\n\n---\n"


def escape(text: str) -> str:
    """HTML-escape <, >, &, ' and " using numeric entities for the quotes."""
    return html.escape(text, quote=False).replace('"', "&#34;").replace("'", "&#39;")


def anchor(name: str) -> str:
    """Return the heading anchor for an endpoint name: /api/v0/a/b -> api-v0-a-b."""
    return name.removeprefix("/").replace("/", "-")


def _gen_argument(arg: Argument, alias_to_arg: bool) -> str:
    # File arguments are documented by the request body block
    if arg.type.is_file:
        return ""

    alias = "arg" if alias_to_arg else arg.name
    description = escape(FIX_DESCRIPTION.sub("", arg.description))

    line = f"- `{alias}` [{arg.type.value}]: {description}"
    if arg.default:
        line += f" Default: `{arg.default}`."
    if arg.required:
        line += " Required: **yes**."
    else:
        line += " Required: no."
    return line + "\n"
