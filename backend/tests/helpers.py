from unittest.mock import AsyncMock, MagicMock


def mock_repository() -> MagicMock:
    """Repository double: create() is synchronous, everything else is awaited."""
    repository = MagicMock()
    repository.find = AsyncMock()
    repository.find_one = AsyncMock()
    repository.find_one_or_fail = AsyncMock()
    repository.create = MagicMock()
    repository.save = AsyncMock()
    repository.delete = AsyncMock()
    return repository
