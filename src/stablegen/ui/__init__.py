"""Gradio front end: form controller, state updates, presenter and page layout."""
