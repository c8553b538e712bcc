"""Default configuration values."""

DEFAULT_CONFIG_YAML = """
format: hex

templates:
  css: "rgb(%{r}, %{g}, %{b})"
  ansi: "%{r};%{g};%{b}"
  hex-upper: "#%{02Hr}%{02Hg}%{02Hb}"

editor:
  preview_sample: "#808080"
  styles:
    literal: ""
    escape: "ansimagenta"
    expansion: "ansicyan"
    pad: "ansiyellow"
    base: "ansigreen"
    channel: "ansicyan bold"
    error: "ansired underline"
"""
