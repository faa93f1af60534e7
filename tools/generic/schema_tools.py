"""Schema inspection tools: full SDL, text search and enum lookup."""

import json
import re
from typing import Any

from graphql import EnumTypeDefinitionNode, EnumTypeExtensionNode, GraphQLError, parse
from pydantic import Field

from domain.errors import ToolError
from tools.base import BaseTool, ToolArgs, ToolContext


class IntrospectSchemaArgs(ToolArgs):
    # Clients that cannot send an empty object send this placeholder instead
    ignore: bool = Field(default=False, alias="__ignore__", description="This does not do anything")


class IntrospectSchemaTool(BaseTool):
    args_model = IntrospectSchemaArgs

    @property
    def name(self) -> str:
        return "introspect-schema"

    @property
    def description(self) -> str:
        return (
            "Introspect the GraphQL schema, use this tool before doing a query to get the schema "
            "information if you do not have it available as a resource already."
        )

    async def execute(self, args: IntrospectSchemaArgs, context: ToolContext) -> str:
        return await context.resolver.resolve()


class SearchSchemaArgs(ToolArgs):
    query: str = Field(min_length=1, description="Text to look for in the schema")
    max_results: int = Field(default=10, ge=1, le=200, description="Maximum number of result lines")
    context_lines: int = Field(default=0, ge=0, le=5, description="Lines of context around each match")
    case_sensitive: bool = Field(default=False, description="Match case exactly")
    max_output_chars: int = Field(default=2000, ge=200, le=8000, description="Cap on the size of the result")


def search_lines(
    text: str,
    query: str,
    max_results: int = 10,
    context_lines: int = 0,
    case_sensitive: bool = False,
) -> tuple[int, list[str], bool]:
    """
    Line-oriented substring search.

    Returns:
        (number of matching lines kept, result lines as "<lineno>: <text>",
         whether anything was left out)

    Implementation Notes:
        - Context lines shared by neighbouring matches are emitted once
        - Once max_results lines are collected, scanning stops at the next
          match; only then is the result reported as truncated
    """
    lines = text.splitlines()
    needle = query if case_sensitive else query.lower()
    results: list[str] = []
    seen: set[int] = set()
    matches = 0
    truncated = False

    for i, line in enumerate(lines):
        hay = line if case_sensitive else line.lower()
        if needle not in hay:
            continue
        if len(results) >= max_results:
            truncated = True
            break
        matches += 1
        for j in range(max(0, i - context_lines), min(len(lines), i + context_lines + 1)):
            if j in seen:
                continue
            seen.add(j)
            results.append(f"{j + 1}: {lines[j]}")
    if len(results) > max_results:
        results = results[:max_results]
        truncated = True
    return matches, results, truncated


def cap_results(results: list[str], max_chars: int) -> list[str]:
    """Longest prefix of results whose lines fit in max_chars."""
    capped = []
    total = 0
    for line in results:
        total += len(line) + 1
        if total > max_chars:
            break
        capped.append(line)
    return capped


class SearchSchemaTool(BaseTool):
    args_model = SearchSchemaArgs

    @property
    def name(self) -> str:
        return "search-schema"

    @property
    def description(self) -> str:
        return (
            "Search the GraphQL schema text and return matching lines with small context. Useful "
            "to avoid dumping the full schema."
        )

    async def execute(self, args: SearchSchemaArgs, context: ToolContext) -> dict[str, Any]:
        schema = await context.resolver.resolve_for_search()
        matches, results, truncated = search_lines(
            schema, args.query, args.max_results, args.context_lines, args.case_sensitive
        )
        payload = {
            "query": args.query,
            "matches": matches,
            "truncated": truncated,
            "results": results,
        }
        if len(json.dumps(payload, indent=2)) > args.max_output_chars:
            payload["truncated"] = True
            payload["results"] = cap_results(results, args.max_output_chars)
        return payload


class EnumValuesArgs(ToolArgs):
    enum_name: str = Field(min_length=1, description="Name of the GraphQL enum")


# Pieces of an enum body that are not value names: block and single-line
# descriptions, comments, then directives (string arguments already removed)
_ENUM_NOISE = re.compile(r'"""(?:.|\n)*?"""|"[^"\n]*"|#[^\n]*')
_DIRECTIVE = re.compile(r"@\w+(?:\s*\([^)]*\))?")


def _scan_enum_values(text: str, enum_name: str) -> list[str] | None:
    """Text scan of an enum body, for SDL that does not parse as a whole."""
    match = re.search(
        rf"^\s*(?:extend\s+)?enum\s+{re.escape(enum_name)}\b[^{{\n]*\{{([^}}]*)\}}",
        text,
        re.MULTILINE,
    )
    if match is None:
        return None
    body = _DIRECTIVE.sub(" ", _ENUM_NOISE.sub(" ", match.group(1)))
    return body.split()


def enum_values(text: str, enum_name: str) -> list[str] | None:
    """
    Values of `enum <enum_name>` in SDL text, None when the enum is absent.

    Implementation Notes:
        - The SDL is parsed with graphql-core; values from `extend enum`
          blocks are appended in document order
        - A file that does not parse (search keeps working on partially
          broken schema files) falls back to a text scan of the enum body
    """
    try:
        document = parse(text, no_location=True)
    except GraphQLError:
        return _scan_enum_values(text, enum_name)

    values = None
    for definition in document.definitions:
        if not isinstance(definition, (EnumTypeDefinitionNode, EnumTypeExtensionNode)):
            continue
        if definition.name.value != enum_name:
            continue
        values = (values or []) + [value.name.value for value in definition.values or ()]
    return values


class GetEnumValuesTool(BaseTool):
    args_model = EnumValuesArgs

    @property
    def name(self) -> str:
        return "get-enum-values"

    @property
    def description(self) -> str:
        return (
            "Return all values for a GraphQL enum by name. Use this instead of introspecting the "
            "full schema."
        )

    async def execute(self, args: EnumValuesArgs, context: ToolContext) -> dict[str, Any]:
        schema = await context.resolver.resolve_for_search()
        values = enum_values(schema, args.enum_name)
        if values is None:
            raise ToolError(f"Enum not found: {args.enum_name}")
        return {"enum": args.enum_name, "values": values}
