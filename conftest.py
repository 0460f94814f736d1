"""Root conftest: puts the repository root on sys.path so tests import part_namer from source."""
