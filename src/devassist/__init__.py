"""DevAssist - find the merged pull requests behind a Salesforce record's metadata."""

__version__ = "0.1.0"
