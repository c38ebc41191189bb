"""
UI layout components for Vocabulary Import Workbench.

Defines the two-column Gradio layout: paste area and row editor on the
left, preview table on the right.
"""

import gradio as gr
from typing import Dict, Any

from services.preview_table import PREVIEW_COLUMNS


# 全局样式 - 状态栏、预览表格
GLOBAL_CSS = """
<style>
.load-status {
    font-size: 16px !important;
    line-height: 1.6 !important;
    padding: 8px 12px;
    background: #f5f9ff;
    border-left: 4px solid #1976d2;
    border-radius: 4px;
}

.preview-table table {
    font-size: 16px !important;
}

.source-input textarea {
    font-size: 16px !important;
    min-height: 240px;
}
</style>
"""

MODE_CHOICES = [
    ("自动识别", "auto"),
    ("分隔符（Tab / : / = / → / -）", "delimiter"),
    ("交替行（单词、释义各一行）", "alternating"),
    ("单行（只有单词）", "singleLine"),
]

STATUS_CHOICES = [
    ("已确认", "confirmed"),
    ("待确认", "candidate"),
    ("未分类", "unclassified"),
]

POLICY_CHOICES = [
    ("跳过重复", "skip"),
    ("覆盖重复", "overwrite"),
    ("保留两者", "keep_both"),
]


def get_global_css() -> str:
    """获取全局CSS样式"""
    return GLOBAL_CSS


def create_header(components: Dict[str, Any]) -> None:
    """
    创建标题和使用说明
    """
    gr.Markdown("# 📚 单词批量导入")
    with gr.Accordion("📖 使用说明", open=False):
        gr.Markdown("""
**操作流程：** 粘贴单词列表 → 选择解析模式 → 检查并修正每一行 → 导入已确认的词条

- **自动识别**：有分隔符时按分隔符拆分；没有分隔符且行数为偶数时按交替行配对；否则每行作为一个单词
- 切换模式或重新解析会**清除所有手动修改**
- 只有状态为「已确认」且单词和释义都不为空的行会被导入
        """)
    components['status_display'] = gr.HTML(
        value='<div class="load-status">等待粘贴文本<br>当前会话: - / -</div>'
    )


def create_left_column(components: Dict[str, Any]) -> None:
    """
    创建左侧列：粘贴区 + 单行编辑器
    """
    components['source_input'] = gr.Textbox(
        label="📋 粘贴文本",
        lines=10,
        placeholder="apple\tりんご\nbanana: バナナ",
        elem_classes=["source-input"]
    )
    components['mode_selector'] = gr.Radio(
        choices=MODE_CHOICES,
        value="auto",
        label="解析模式"
    )
    with gr.Row():
        components['parse_btn'] = gr.Button("🔍 解析", variant="primary")
        components['reparse_btn'] = gr.Button("🔄 重新解析")
    
    with gr.Group():
        components['row_id'] = gr.Textbox(label="行ID", interactive=False, visible=False)
        components['term_editor'] = gr.Textbox(label="单词", lines=1)
        components['meaning_editor'] = gr.Textbox(label="释义", lines=2)
        components['save_row_btn'] = gr.Button("💾 保存修改")
        with gr.Row():
            components['status_selector'] = gr.Dropdown(
                choices=STATUS_CHOICES,
                label="手动设置状态",
                scale=3
            )
            components['set_status_btn'] = gr.Button("📌 设置", scale=1)


def create_right_column(components: Dict[str, Any]) -> None:
    """
    创建右侧列：预览表格 + 导入/放弃
    """
    components['preview_table'] = gr.Dataframe(
        headers=PREVIEW_COLUMNS,
        interactive=False,
        wrap=True,
        elem_classes=["preview-table"]
    )
    with gr.Row():
        components['policy_selector'] = gr.Dropdown(
            choices=POLICY_CHOICES,
            value="skip",
            label="重复单词处理",
            scale=2
        )
        components['accept_btn'] = gr.Button("✅ 导入已确认", variant="primary", scale=1)
        components['discard_btn'] = gr.Button("🗑️ 放弃", variant="stop", scale=1)


def create_import_layout() -> Dict[str, Any]:
    """
    创建完整的导入预览布局
    
    Returns:
        包含所有UI组件的字典
    """
    components = {}
    
    # 注入全局CSS
    gr.HTML(get_global_css())
    
    create_header(components)
    
    with gr.Row():
        with gr.Column(scale=2):
            create_left_column(components)
        with gr.Column(scale=5):
            create_right_column(components)
    
    return components
