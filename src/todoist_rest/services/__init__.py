"""Services layer: wire codec, configuration and the Todoist transport adapter."""
