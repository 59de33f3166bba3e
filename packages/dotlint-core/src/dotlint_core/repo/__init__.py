from .git import GitRepository, RepositoryInspector

__all__ = ["GitRepository", "RepositoryInspector"]
