"""End-to-end decomposition: text -> analysis -> request -> task graph."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from codeplan.config import CodeplanConfig
from codeplan.interpretation import InterpretedRequest, build_lookup_tables, interpret
from codeplan.lexical import analyze
from codeplan.planning import Task, TaskKind, build_tasks, topological_order

logger = logging.getLogger(__name__)


@dataclass
class Decomposition:
    """An interpreted request and the tasks built from it."""

    request: InterpretedRequest
    tasks: list[Task] = field(default_factory=list)

    @property
    def root(self) -> Task:
        return self.task_for(TaskKind.CODE_GENERATION)

    def task_for(self, kind: TaskKind) -> Optional[Task]:
        return next((task for task in self.tasks if task.kind == kind), None)

    def kinds(self) -> list[TaskKind]:
        return [task.kind for task in self.tasks]

    def execution_order(self) -> list[Task]:
        return topological_order(self.tasks)

    def to_dict(self) -> dict:
        return {
            "request": self.request.to_dict(),
            "tasks": [task.to_dict() for task in self.tasks],
            "execution_order": [task.id for task in self.execution_order()],
        }


def decompose(text: str, config: Optional[CodeplanConfig] = None) -> Decomposition:
    """Run the full decomposition for one request.

    Raises KeywordTableError if the configured keyword tables are
    malformed. Nothing about the request itself raises.
    """
    config = config or CodeplanConfig()
    tables = build_lookup_tables(config.keywords)

    analysis = analyze(text, extra_technologies=tables.all_values)
    request = interpret(analysis, raw_text=text, config=config, tables=tables)
    tasks = build_tasks(request)

    logger.info(f"Decomposed request into {len(tasks)} tasks")
    return Decomposition(request=request, tasks=tasks)
