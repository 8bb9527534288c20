from hypermodel.errors import (
    ExpansionError,
    HypermediaError,
    MissingLinkError,
    StructuralMismatchError,
    UnsupportedMediaTypeError,
)
from hypermodel.models.link import SELF, Link, LinkRelation
from hypermodel.models.representation import (
    Embedded,
    EmbeddedGroup,
    EmbedKind,
    ModelKind,
    RepresentationModel,
)
from hypermodel.renderers import MediaType, get_renderer, render
from hypermodel.services.hal_model_builder import HalModelBuilder
from hypermodel.services.model import Model
from hypermodel.services.model_builder import ModelBuilder

__all__ = [
    "SELF",
    "Embedded",
    "EmbeddedGroup",
    "EmbedKind",
    "ExpansionError",
    "HalModelBuilder",
    "HypermediaError",
    "Link",
    "LinkRelation",
    "MediaType",
    "MissingLinkError",
    "Model",
    "ModelBuilder",
    "ModelKind",
    "RepresentationModel",
    "StructuralMismatchError",
    "UnsupportedMediaTypeError",
    "get_renderer",
    "render",
]
