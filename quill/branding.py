"""Product naming used in CLI output."""

CLI_PRIMARY_COMMAND = "quill"
