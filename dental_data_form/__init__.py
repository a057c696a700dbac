"""Core logic for the Dental Data Form editor.

The Gradio UI lives in `app.py`. This package contains:
- the typed document model and its mutation operations
- bullet-point normalization and JSON export of a finished page
- Gradio event handlers that bridge the two
"""
