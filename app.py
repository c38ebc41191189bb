"""
Vocabulary Import Workbench
单词批量导入工作台

Main entry point for the Gradio application.
"""

import gradio as gr
from ui.layout import create_import_layout
from ui.event_handlers import (
    empty_state,
    handle_paste,
    handle_mode_change,
    handle_reparse,
    load_row_to_editor,
    handle_update_row,
    handle_set_status,
    handle_accept,
    handle_discard
)


def main():
    """Main application entry point."""
    with gr.Blocks(
        title="单词批量导入工作台",
        theme=gr.themes.Soft()
    ) as app:
        
        # Application State
        app_state = gr.State(empty_state())
        
        components = create_import_layout()
        
        table_outputs = [
            app_state,
            components['preview_table'],
            components['status_display']
        ]
        
        # ========== Event Handlers ==========
        
        # Parse pasted text into a new session
        components['parse_btn'].click(
            fn=handle_paste,
            inputs=[components['source_input'], components['mode_selector'], app_state],
            outputs=table_outputs
        )
        
        # Mode switch reparses the current session
        components['mode_selector'].change(
            fn=handle_mode_change,
            inputs=[components['mode_selector'], app_state],
            outputs=table_outputs
        )
        
        components['reparse_btn'].click(
            fn=handle_reparse,
            inputs=[app_state],
            outputs=table_outputs
        )
        
        # Row selection loads the row into the editor
        def on_row_select(state, evt: gr.SelectData):
            row_index = evt.index[0] if isinstance(evt.index, (list, tuple)) else evt.index
            row_id, term, meaning, status = load_row_to_editor(row_index, state)
            return row_id, term, meaning, gr.update(value=status or None)
        
        components['preview_table'].select(
            fn=on_row_select,
            inputs=[app_state],
            outputs=[
                components['row_id'],
                components['term_editor'],
                components['meaning_editor'],
                components['status_selector']
            ]
        )
        
        components['save_row_btn'].click(
            fn=handle_update_row,
            inputs=[
                components['row_id'],
                components['term_editor'],
                components['meaning_editor'],
                app_state
            ],
            outputs=table_outputs
        )
        
        components['set_status_btn'].click(
            fn=handle_set_status,
            inputs=[components['row_id'], components['status_selector'], app_state],
            outputs=table_outputs
        )
        
        # Accept / discard end the session
        components['accept_btn'].click(
            fn=handle_accept,
            inputs=[components['policy_selector'], app_state],
            outputs=table_outputs
        )
        
        components['discard_btn'].click(
            fn=handle_discard,
            inputs=[app_state],
            outputs=table_outputs
        )
        
        # Footer
        gr.HTML('<hr style="border: 1px solid #e0e0e0; margin: 20px 0;">')
        gr.Markdown("✅ 系统已就绪，请粘贴单词列表开始导入")
    
    return app


if __name__ == "__main__":
    app = main()
    app.launch(show_error=True, quiet=False)
