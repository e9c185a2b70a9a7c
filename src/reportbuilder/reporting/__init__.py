"""Report definition model, builder and summaries."""
