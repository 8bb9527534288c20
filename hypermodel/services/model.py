from __future__ import annotations

from typing import Any, Optional

from hypermodel.models.link import Link
from hypermodel.models.representation import RepresentationModel
from hypermodel.services.hal_model_builder import HalModelBuilder
from hypermodel.services.model_builder import ModelBuilder
from hypermodel.services.relations import RelationProvider


class Model:
    """Entry points: Model.builder(), Model.hal() and Model.of(...)."""

    @staticmethod
    def builder() -> ModelBuilder:
        return ModelBuilder()

    @staticmethod
    def hal(relation_provider: Optional[RelationProvider] = None) -> HalModelBuilder:
        return HalModelBuilder(relation_provider)

    @staticmethod
    def of(content: Any, *links: Link) -> RepresentationModel:
        """Shorthand for a single entity model with the given links."""
        return ModelBuilder().entity(content).links(links).build()
