"""Wiki site configuration: settings record, persistence and storage helpers."""
