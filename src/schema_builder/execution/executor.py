from __future__ import annotations

from functools import partial
from typing import Any

from graphql import ExecutionResult, GraphQLSchema, graphql

from schema_builder.execution.context import LOADERS_KEY
from schema_builder.execution.instrumentation import ExecutionState, Instrumentation
from schema_builder.loaders.repository import DataLoaderRepository


class GraphQL:
    # Executable schema plus the request-scoped plumbing: loaders and instrumentation.
    def __init__(
        self,
        schema: GraphQLSchema,
        *,
        loaders: DataLoaderRepository,
        instrumentation: Instrumentation | None = None,
    ) -> None:
        self.schema = schema
        self.loaders = loaders
        self.instrumentation = instrumentation or Instrumentation()

    async def execute(
        self,
        query: str,
        variables: dict[str, Any] | None = None,
        operation_name: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> ExecutionResult:
        state = ExecutionState(context=dict(context or {}))
        state.context[LOADERS_KEY] = self.loaders.for_request(
            on_batch=partial(self.instrumentation.on_batch, state)
        )
        self.instrumentation.begin_execution(state)
        result = await graphql(
            self.schema,
            query,
            context_value=state.context,
            variable_values=variables,
            operation_name=operation_name,
        )
        self.instrumentation.end_execution(state, result)
        return result
