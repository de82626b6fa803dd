"""Root conftest: enable decochain fixtures."""

pytest_plugins = ["decochain.presentation.pytest_plugin"]
