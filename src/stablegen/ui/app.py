"""Gradio UI for StableGen."""

import logging

import gradio as gr

from stablegen.core.client import StabilityClient
from stablegen.core.config import config
from stablegen.core.models import DEFAULT_STEPS, MAX_STEPS, MIN_STEPS
from stablegen.core.presets import DEFAULT_STYLE_PRESET, preset_choices

from .controller import FormController, GenerationBackend
from .handlers import (
    handle_dismiss_error,
    handle_prompt_change,
    handle_steps_change,
    handle_style_change,
    submit_form,
)
from .presenter import EMPTY_IMAGES_HTML

# Configure logging
logging.basicConfig(
    level=config.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def create_ui(client: GenerationBackend | None = None) -> gr.Blocks:
    """Create the Gradio UI.

    Args:
        client: Generation client shared by all sessions (default: a
            StabilityClient built from the global config)

    Returns:
        Gradio Blocks app
    """
    if client is None:
        client = StabilityClient(config)

    app = gr.Blocks(title="StableGen")

    with app:
        # Session state - one controller per user
        form_state = gr.State(FormController())

        gr.Markdown(
            """
            # StableGen
            ### Text-to-image with Stability AI
            """
        )

        if not config.has_api_key:
            gr.Markdown(
                "⚠️ **No API key configured.** Set `STABLEGEN_API_KEY` before generating."
            )

        # Error banner (hidden until a generation fails)
        with gr.Group(visible=False) as error_group:
            error_text = gr.Markdown(value="")
            dismiss_btn = gr.Button("Dismiss", size="sm")

        prompt_input = gr.Textbox(
            label="Text Prompt",
            placeholder="Describe the image you want to generate...",
            lines=3,
            value="",
        )
        prompt_error = gr.Markdown(value="", visible=False)

        steps_input = gr.Slider(
            label="Steps",
            minimum=MIN_STEPS,
            maximum=MAX_STEPS,
            step=1,
            value=DEFAULT_STEPS,
        )
        steps_error = gr.Markdown(value="", visible=False)

        style_input = gr.Dropdown(
            label="Style",
            choices=preset_choices(),
            value=DEFAULT_STYLE_PRESET.value,
        )
        style_error = gr.Markdown(value="", visible=False)

        generate_btn = gr.Button("Submit", variant="primary")

        gr.Markdown("### Generated Images")
        images_output = gr.HTML(value=EMPTY_IMAGES_HTML)

        # Field edits re-validate the edited field only
        prompt_input.change(
            fn=handle_prompt_change,
            inputs=[prompt_input, form_state],
            outputs=[prompt_error, form_state],
        )
        steps_input.change(
            fn=handle_steps_change,
            inputs=[steps_input, form_state],
            outputs=[steps_error, form_state],
        )
        style_input.change(
            fn=handle_style_change,
            inputs=[style_input, form_state],
            outputs=[style_error, form_state],
        )

        generate_btn.click(
            fn=lambda prompt, steps, style, controller: submit_form(
                prompt, steps, style, controller, client
            ),
            inputs=[prompt_input, steps_input, style_input, form_state],
            outputs=[
                images_output,
                error_group,
                error_text,
                prompt_error,
                steps_error,
                style_error,
                form_state,
            ],
        )

        dismiss_btn.click(
            fn=handle_dismiss_error,
            inputs=[form_state],
            outputs=[error_group, error_text, form_state],
        )

    return app


def main():
    """Main entry point for the standalone Gradio application."""
    logger.info("Starting StableGen UI...")
    logger.info(f"Configuration: {config.model_dump(exclude={'api_key'})}")

    with StabilityClient(config) as client:
        app = create_ui(client)

        logger.info(f"Launching Gradio UI on {config.server_host}:{config.server_port}")

        app.launch(
            server_name=config.server_host,
            server_port=config.server_port,
            share=config.gradio_share,
            show_error=True,
            inbrowser=False,
        )


if __name__ == "__main__":
    main()
