"""Run configuration, presets and definition loading."""
