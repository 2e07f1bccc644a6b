from pacl.models.clone_request import CloneRequest
from pacl.models.repository_identifier import RepositoryIdentifier

__all__ = ["CloneRequest", "RepositoryIdentifier"]
