# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""'gqlprojection compile': Print the projection for a query against a schema."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import click
from graphql import (
    FieldNode,
    FragmentDefinitionNode,
    GraphQLError,
    OperationType,
    build_schema,
    get_named_type,
    get_operation_ast,
    parse,
    validate,
)
from rich.markup import escape

from gqlprojection.cli.console import console, print_projection_table
from gqlprojection.core.config import Config
from gqlprojection.kernel.exceptions import ContractViolationException, ProjectionException
from gqlprojection.logging.structlog_adapter import StructlogAdapter
from gqlprojection.projection.compiler import ProjectionCompiler
from gqlprojection.projection.graph import MongoDbProjection
from gqlprojection.projection.metadata import COMPUTED_DIRECTIVE_SDL

_DEFAULT_CONFIG = "gqlprojection.yaml"


def compile_projection(
    schema_sdl: str,
    query: str,
    compiler: ProjectionCompiler,
    *,
    field_name: str | None = None,
    operation_name: str | None = None,
    type_name: str | None = None,
    excluded_fields: tuple[str, ...] = (),
) -> MongoDbProjection:
    """Compile the projection for one root field of *query*.

    The root field defaults to the first field of the operation and its
    document type defaults to the field's named return type.
    """
    if "directive @computed" not in schema_sdl:
        schema_sdl = f"{COMPUTED_DIRECTIVE_SDL}\n\n{schema_sdl}"
    schema = build_schema(schema_sdl)
    document = parse(query)

    errors = validate(schema, document)
    if errors:
        raise ContractViolationException(
            "Query does not validate against the schema: " + "; ".join(e.message for e in errors),
            context={"errors": len(errors)},
        )

    operation = get_operation_ast(document, operation_name)
    if operation is None:
        raise ContractViolationException(
            f"Operation '{operation_name}' not found" if operation_name else "Query must contain exactly one operation",
        )

    root_fields = [s for s in operation.selection_set.selections if isinstance(s, FieldNode)]
    if not root_fields:
        raise ContractViolationException("Operation selects no root field")
    target = field_name or root_fields[0].name.value
    field_nodes = [node for node in root_fields if node.name.value == target]

    root_type = {
        OperationType.QUERY: schema.query_type,
        OperationType.MUTATION: schema.mutation_type,
        OperationType.SUBSCRIPTION: schema.subscription_type,
    }[operation.operation]
    if not field_nodes or root_type is None or target not in root_type.fields:
        raise ContractViolationException(f"Root field '{target}' is not selected by the operation")

    graphql_type: Any
    if type_name is not None:
        graphql_type = schema.get_type(type_name)
        if graphql_type is None:
            raise ContractViolationException(f"Type '{type_name}' is not defined in the schema")
    else:
        graphql_type = get_named_type(root_type.fields[target].type)

    fragments = {
        definition.name.value: definition
        for definition in document.definitions
        if isinstance(definition, FragmentDefinitionNode)
    }
    return compiler.compile_nodes(field_nodes, fragments, graphql_type, *excluded_fields)


@click.command()
@click.option(
    "--schema", "schema_path", required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path), help="GraphQL SDL file.",
)
@click.option(
    "--query", "query_path", required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path), help="GraphQL query document.",
)
@click.option("--field", "field_name", default=None, help="Root field to compile (default: first).")
@click.option("--operation", "operation_name", default=None, help="Operation name, for multi-operation documents.")
@click.option("--type", "type_name", default=None, help="Document type (default: the root field's type).")
@click.option("--exclude", "excluded_fields", multiple=True, help="Top-level field to leave out. Repeatable.")
@click.option(
    "--config", "config_path", default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path), help=f"Config file (default: ./{_DEFAULT_CONFIG}).",
)
@click.option("--format", "output_format", type=click.Choice(["json", "table"]), default="json", show_default=True)
def compile_command(
    schema_path: Path,
    query_path: Path,
    field_name: str | None,
    operation_name: str | None,
    type_name: str | None,
    excluded_fields: tuple[str, ...],
    config_path: Path | None,
    output_format: str,
) -> None:
    """Compile the MongoDB projection a query needs."""
    try:
        config = Config.from_file(config_path or Path(_DEFAULT_CONFIG))
        StructlogAdapter.from_config(config).configure()
        compiler = ProjectionCompiler.from_config(config)

        projection = compile_projection(
            schema_path.read_text(),
            query_path.read_text(),
            compiler,
            field_name=field_name,
            operation_name=operation_name,
            type_name=type_name,
            excluded_fields=excluded_fields,
        )
    except (ProjectionException, GraphQLError, TypeError, ValueError) as exc:
        console.print(f"[error]Error:[/error] {escape(str(exc))}")
        raise SystemExit(1) from None

    if output_format == "table":
        print_projection_table(projection, title="Projection")
    else:
        console.print_json(json.dumps(projection))
