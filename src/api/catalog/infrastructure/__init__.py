"""Store backends for the catalog context."""
