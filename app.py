import gradio as gr
from functools import partial

from dental_data_form.config import load_config
from dental_data_form.editor import DocumentModel
from dental_data_form.handlers import (
    export_document_handler,
    handle_add_item,
    handle_bullet_text_edit,
    handle_checkbox_change,
    handle_field_edit,
    handle_file_name_change,
    handle_remove_item,
    preview_document_handler,
)
from dental_data_form.locations import (
    CallToActionField,
    LinkBlockField,
    LinkCardField,
    RootField,
    SectionDescriptionField,
    SectionField,
)
from dental_data_form.logger import configure_logging
from dental_data_form.models import RepeatedGroup

CONFIG = load_config()
configure_logging(CONFIG.log_level)

# --- UI Definition ---
with gr.Blocks(title="Dental Data Form") as demo:
    gr.Markdown("# Dental Data Form")

    # State
    model_state = gr.State(DocumentModel())
    layout_version = gr.State(value=0)

    def text_input(path, label, value, placeholder, lines=1):
        box = gr.Textbox(label=label, value=value, placeholder=placeholder, lines=lines)
        box.input(fn=partial(handle_field_edit, path), inputs=[box, model_state], outputs=[model_state])
        return box

    def add_button(label, group):
        btn = gr.Button(label)
        btn.click(
            fn=partial(handle_add_item, group),
            inputs=[model_state, layout_version],
            outputs=[model_state, layout_version],
        )

    def remove_button(group, index, count):
        # Last remaining row cannot be removed.
        if count <= 1:
            return
        btn = gr.Button("X", size="sm", variant="stop", scale=0, min_width=40)
        btn.click(
            fn=partial(handle_remove_item, group, index),
            inputs=[model_state, layout_version],
            outputs=[model_state, layout_version],
        )

    with gr.Accordion("File Name", open=True):
        file_name = gr.Textbox(
            label="Name (for the JSON file)",
            placeholder="Enter name for the JSON file (e.g. missing-teeth-treatment)",
            info="This name will be used for the downloaded JSON file and will not be included in the data.",
        )
        file_name.input(fn=handle_file_name_change, inputs=[file_name, model_state], outputs=[model_state])

    with gr.Accordion("Basic Information", open=True):
        text_input(RootField("hero_image"), "Hero Image", "", "Enter image path (e.g. /images/hero.webp)")
        with gr.Row():
            text_input(RootField("heading_light"), "Heading Light", "", "Light weight heading text")
            text_input(RootField("heading_bold"), "Heading Bold", "", "Bold weight heading text")

    with gr.Row():
        is_link_cards = gr.Checkbox(label="Show Link Cards", value=False)
        is_link_blocks = gr.Checkbox(label="Show Link Blocks", value=False)
    for checkbox, name in ((is_link_cards, "is_link_cards"), (is_link_blocks, "is_link_blocks")):
        checkbox.input(
            fn=partial(handle_checkbox_change, name),
            inputs=[checkbox, model_state, layout_version],
            outputs=[model_state, layout_version],
        )

    @gr.render(inputs=[model_state], triggers=[layout_version.change, demo.load])
    def render_groups(model):
        if model is None:
            gr.Markdown("No form data.")
            return
        doc = model.document

        gr.Markdown("### Call To Actions")
        for i, cta in enumerate(doc.call_to_actions):
            with gr.Row(equal_height=True):
                text_input(CallToActionField(i, "name"), "CTA Name", cta.name, "Enter CTA name")
                text_input(CallToActionField(i, "link"), "CTA Link", cta.link, "Enter CTA link")
                remove_button(RepeatedGroup.CALL_TO_ACTIONS, i, len(doc.call_to_actions))
        add_button("Add Call To Action", RepeatedGroup.CALL_TO_ACTIONS)

        gr.Markdown("### Sections")
        for i, section in enumerate(doc.sections):
            with gr.Group():
                with gr.Row(equal_height=True):
                    gr.Markdown(f"**Section {i + 1}**")
                    remove_button(RepeatedGroup.SECTIONS, i, len(doc.sections))
                with gr.Row():
                    text_input(SectionField(i, "heading_light"), "Heading Light", section.heading_light, "Enter light heading")
                    text_input(SectionField(i, "heading_bold"), "Heading Bold", section.heading_bold, "Enter bold heading")
                text_input(SectionField(i, "image"), "Image", section.image, "Enter image path")
                text_input(SectionDescriptionField(i, "paragraph1"), "Paragraph 1",
                           section.description.paragraph1, "Enter first paragraph", lines=3)
                text_input(SectionDescriptionField(i, "paragraph2"), "Paragraph 2",
                           section.description.paragraph2, "Enter second paragraph", lines=3)
                bullets = gr.Textbox(
                    label="Bullet Points",
                    value=model.raw_bullet_text(i),
                    placeholder="Enter bullet points separated by commas or bullet points (•)",
                    lines=3,
                )
                bullets.input(
                    fn=partial(handle_bullet_text_edit, i),
                    inputs=[bullets, model_state],
                    outputs=[model_state],
                )
        add_button("Add Section", RepeatedGroup.SECTIONS)

        if doc.is_link_cards:
            gr.Markdown("### Link Cards")
            for i, card in enumerate(doc.link_cards):
                with gr.Row(equal_height=True):
                    text_input(LinkCardField(i, "title"), "Card Title", card.title, "Enter card title")
                    text_input(LinkCardField(i, "link"), "Card Link", card.link, "Enter card link")
                    remove_button(RepeatedGroup.LINK_CARDS, i, len(doc.link_cards))
            add_button("Add Link Card", RepeatedGroup.LINK_CARDS)

        if doc.is_link_blocks:
            gr.Markdown("### Link Blocks")
            for i, block in enumerate(doc.link_blocks):
                with gr.Row(equal_height=True):
                    text_input(LinkBlockField(i, "title"), "Block Title", block.title, "Enter block title")
                    text_input(LinkBlockField(i, "sub_title"), "Block Subtitle", block.sub_title, "Enter block subtitle")
                    text_input(LinkBlockField(i, "link"), "Block Link", block.link, "Enter block link")
                    remove_button(RepeatedGroup.LINK_BLOCKS, i, len(doc.link_blocks))
            add_button("Add Link Block", RepeatedGroup.LINK_BLOCKS)

    gr.Markdown("### Export")
    with gr.Row():
        load_preview_btn = gr.Button("Load Preview")
        export_btn = gr.Button("Download JSON", variant="primary")
    status_msg = gr.Textbox(label="Status", interactive=False)
    download_output = gr.File(label="Download Result")
    preview = gr.JSON(label="Preview")

    load_preview_btn.click(fn=preview_document_handler, inputs=[model_state], outputs=[preview])

    export_btn.click(
        fn=partial(export_document_handler, export_dir=CONFIG.export_dir),
        inputs=[model_state],
        outputs=[download_output, status_msg, preview],
    )

if __name__ == "__main__":
    demo.launch(server_name=CONFIG.server_name, server_port=CONFIG.server_port)
