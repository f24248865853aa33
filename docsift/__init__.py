"""DocSift: multi-page bank statement extraction service."""
