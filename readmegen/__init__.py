"""Generate README files from reconciled project metadata."""

from .models import Answers, Document, ProjectInfos
from .resolver import MetadataResolver, resolve_project_infos

__version__ = "0.1.0"

__all__ = ["Answers", "Document", "MetadataResolver", "ProjectInfos", "resolve_project_infos"]
