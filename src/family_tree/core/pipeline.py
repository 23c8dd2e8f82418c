from __future__ import annotations

from family_tree.core.context import EngineContext
from family_tree.core.exceptions import PipelineExecutionError
from family_tree.levels.assigner import assign_levels, unassigned_names
from family_tree.relations.normalizer import count_dangling, normalize_relations
from family_tree.relations.siblings import infer_siblings


class RefreshPipeline:
    """
    Re-derives the store after an import or edit:
    normalize relations, optionally infer siblings, assign levels.
    No business logic lives here.
    """

    def __init__(self, context: EngineContext):
        self.ctx = context
        self.log = context.logger

    def run(self, infer: bool = False) -> None:
        store = self.ctx.store
        self.log.debug("Refresh starting (%d members)", len(store))

        try:
            members = store.snapshot()
            dangling = count_dangling(members)

            members = normalize_relations(
                members,
                drop_dangling=self.ctx.config.drop_dangling_references,
            )
            if infer:
                members = infer_siblings(members)
            members = assign_levels(members)

            store.replace_all(members)

        except Exception as exc:
            self.log.exception("Refresh pipeline failed")
            raise PipelineExecutionError(str(exc)) from exc

        unassigned = unassigned_names(members)
        self.ctx.stats.update(
            members=len(members),
            dangling_references=dangling,
            unassigned=len(unassigned),
        )
        if unassigned:
            self.log.info(
                "%d members have no level (isolated or cyclic): %s",
                len(unassigned),
                ", ".join(unassigned[:10]),
            )
        self.log.debug("Refresh complete")
