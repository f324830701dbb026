"""UI configuration constants.

Centralizes labels and timing values for the presentation layer.
"""

# Prompt and reply labels
INPUT_PROMPT = "You: "
STREAM_LABEL = "Assistant: "
RENDERED_LABEL = "Assistant (Markdown):"

# Progress indicator shown while a buffered request is in flight
SPINNER_GLYPHS = ("|", "/", "-", "\\")
SPINNER_INTERVAL = 0.1  # Seconds between glyph updates
SPINNER_TEXT = "Loading..."

# Markdown rendering
CODE_THEME = "monokai"

COMMAND_HELP = """Commands:
  /ns        -> new blank session (Normal mode)
  /ns <msg>  -> new Normal session with an initial message
  /nsm       -> new blank session (Markdown mode)
  /nsm <msg> -> new Markdown session with an initial message
  /quit      -> exit
"""
