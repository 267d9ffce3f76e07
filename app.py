import gradio as gr
import uvicorn

from json_table_renderer.api import create_app
from json_table_renderer.config import configure_logging, get_settings
from json_table_renderer.handlers import (
    load_json_file,
    render_document_handler,
    save_document_handler,
)

# --- UI Definition ---
with gr.Blocks(title="JSON Table Renderer") as demo:
    gr.Markdown("# JSON to ASCII Table")
    gr.Markdown("Upload or paste JSON records to render them as a box-drawn table with a nested header.")

    with gr.Row():
        # Left Panel: Input
        with gr.Column(scale=1):
            gr.Markdown("### 1. Import")
            file_input = gr.File(label="Upload JSON File", file_types=[".json"])
            status_msg = gr.Textbox(label="Status", interactive=False)
            json_text = gr.Code(label="Records (JSON)", language="json", lines=18)

        # Right Panel: Output
        with gr.Column(scale=1):
            gr.Markdown("### 2. Render")
            title_input = gr.Textbox(label="Title", placeholder="Dynamic Data Table")
            render_btn = gr.Button("Render Table", variant="primary")
            document_output = gr.Code(label="Document", language="markdown", lines=24)

            gr.Markdown("### 3. Save")
            output_filename = gr.Textbox(label="Output Filename (optional)", placeholder="dynamic-table-<timestamp>.md")
            save_btn = gr.Button("Save Document")
            download_output = gr.File(label="Download Result")

    file_input.upload(
        fn=load_json_file,
        inputs=[file_input],
        outputs=[status_msg, json_text],
    )

    render_btn.click(
        fn=render_document_handler,
        inputs=[json_text, title_input],
        outputs=[document_output, status_msg],
    )

    save_btn.click(
        fn=save_document_handler,
        inputs=[document_output, output_filename],
        outputs=[download_output, status_msg],
    )

settings = get_settings()
app = gr.mount_gradio_app(create_app(settings), demo, path="/ui")

if __name__ == "__main__":
    configure_logging(settings.log_level)
    uvicorn.run(app, host=settings.host, port=settings.port)
