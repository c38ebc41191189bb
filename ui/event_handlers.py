"""
Event handlers for UI components.

Handles user interactions on the import preview and keeps the import
session in the Gradio state dict. Handlers never raise into Gradio: errors
are reported through the status HTML and toast messages.
"""

import logging
from typing import Dict, Any, Tuple, Optional

import gradio as gr
import pandas as pd

from models import RowNotFoundError, SourceTooLargeError
from services.preview_table import rows_to_dataframe, row_ids, status_summary
from utils.validation import validate_content_not_empty, validate_parse_mode

logger = logging.getLogger(__name__)

STATUS_LABELS = {
    "confirmed": "✅ 已确认",
    "candidate": "🟡 待确认",
    "unclassified": "⚪ 未分类",
}


def empty_state() -> Dict[str, Any]:
    """Fresh application state with no active session."""
    return {
        "session": None,
        "vocabulary": [],
        "duplicate_policy": "skip",
    }


def generate_status_html(status_text: str, session=None) -> str:
    """
    生成状态显示HTML（两行文本）。
    
    Args:
        status_text: 第一行的系统状态文本
        session: 当前导入会话（用于第二行的统计）
    
    Returns:
        HTML格式的状态显示
    """
    line1 = status_text or "等待粘贴文本"
    
    if session is not None and not session.is_empty:
        counts = status_summary(session.rows)
        parts = [f"{STATUS_LABELS[key]} {counts[key]}" for key in STATUS_LABELS]
        line2 = f"共 {len(session.rows)} 行 · " + " · ".join(parts)
    else:
        line2 = "当前会话: - / -"
    
    return f'<div class="load-status">{line1}<br>{line2}</div>'


def session_dataframe(app_state: Dict[str, Any]) -> pd.DataFrame:
    """Preview table for the active session (empty when there is none)."""
    session = app_state.get("session")
    return rows_to_dataframe(session.rows if session is not None else [])


def handle_paste(text: str, mode: str, app_state: Dict[str, Any]) -> Tuple[Dict[str, Any], pd.DataFrame, str]:
    """
    Create a new import session from pasted text.
    
    Args:
        text: Pasted text
        mode: Selected parse mode
        app_state: Current application state
    
    Returns:
        Tuple of (app_state, preview dataframe, status html)
    """
    from services import create_session
    
    is_valid, error_msg = validate_content_not_empty(text, "粘贴的文本")
    if not is_valid:
        gr.Warning(error_msg, duration=2.0)
        app_state["session"] = None
        return app_state, session_dataframe(app_state), generate_status_html(f"⚠️ {error_msg}")
    
    is_valid, error_msg = validate_parse_mode(mode)
    if not is_valid:
        gr.Warning(f"解析模式无效: {mode}", duration=2.0)
        return app_state, session_dataframe(app_state), generate_status_html(f"❌ {error_msg}")
    
    try:
        session = create_session(text, mode=mode)
    except SourceTooLargeError as e:
        gr.Warning(str(e), duration=2.0)
        return app_state, session_dataframe(app_state), generate_status_html(f"❌ {str(e)}")
    
    app_state["session"] = session
    
    if session.is_empty:
        status = "⚠️ 文本中没有可导入的行"
    else:
        status = f"✅ 已解析 {len(session.rows)} 行（模式: {session.resolved_mode.value}）"
    return app_state, session_dataframe(app_state), generate_status_html(status, session)


def handle_mode_change(mode: str, app_state: Dict[str, Any]) -> Tuple[Dict[str, Any], pd.DataFrame, str]:
    """
    Switch parse mode; all manual edits are discarded by the reparse.
    
    Args:
        mode: Newly selected parse mode
        app_state: Current application state
    
    Returns:
        Tuple of (app_state, preview dataframe, status html)
    """
    session = app_state.get("session")
    if session is None:
        return app_state, session_dataframe(app_state), generate_status_html("")
    
    is_valid, error_msg = validate_parse_mode(mode)
    if not is_valid:
        gr.Warning(f"解析模式无效: {mode}", duration=2.0)
        return app_state, session_dataframe(app_state), generate_status_html(f"❌ {error_msg}", session)
    
    session.set_mode(mode)
    
    status = f"🔄 已按 {session.mode.value} 重新解析（实际: {session.resolved_mode.value}）"
    return app_state, session_dataframe(app_state), generate_status_html(status, session)


def handle_reparse(app_state: Dict[str, Any]) -> Tuple[Dict[str, Any], pd.DataFrame, str]:
    """Reparse the active session with its current mode."""
    session = app_state.get("session")
    if session is None:
        gr.Warning("无数据可解析", duration=2.0)
        return app_state, session_dataframe(app_state), generate_status_html("⚠️ 无数据可解析")
    
    session.reparse()
    return app_state, session_dataframe(app_state), generate_status_html("🔄 已重新解析，手动修改已清除", session)


def load_row_to_editor(row_index: int, app_state: Dict[str, Any]) -> Tuple[str, str, str, str]:
    """
    Load a row selected in the preview table into the editor.
    
    Args:
        row_index: Index of the row in display order
        app_state: Current application state
    
    Returns:
        Tuple of (row_id, term, meaning, status)
    """
    ids = row_ids(session_dataframe(app_state))
    if not 0 <= row_index < len(ids):
        return "", "", "", ""
    
    row = app_state["session"].get_row(ids[row_index])
    return row.id, row.term, row.meaning, row.status.value


def handle_update_row(row_id: str,
                      term: Optional[str],
                      meaning: Optional[str],
                      app_state: Dict[str, Any]) -> Tuple[Dict[str, Any], pd.DataFrame, str]:
    """
    Save manual edits to a row.
    
    Args:
        row_id: Id of the edited row
        term: New term
        meaning: New meaning
        app_state: Current application state
    
    Returns:
        Tuple of (app_state, preview dataframe, status html)
    """
    session = app_state.get("session")
    if session is None or not row_id:
        gr.Warning("请先选择一行", duration=2.0)
        return app_state, session_dataframe(app_state), generate_status_html("⚠️ 请先选择一行", session)
    
    try:
        row = session.update_row(row_id, term=term, meaning=meaning)
    except RowNotFoundError:
        gr.Warning("该行已不存在，请重新选择", duration=2.0)
        return app_state, session_dataframe(app_state), generate_status_html("❌ 该行已不存在（可能已重新解析）", session)
    
    status = f"✏️ 已保存: {row.term} → {STATUS_LABELS[row.status.value]}"
    return app_state, session_dataframe(app_state), generate_status_html(status, session)


def handle_set_status(row_id: str, status: str, app_state: Dict[str, Any]) -> Tuple[Dict[str, Any], pd.DataFrame, str]:
    """
    Manually override a row's status.
    
    Args:
        row_id: Id of the row
        status: New status value
        app_state: Current application state
    
    Returns:
        Tuple of (app_state, preview dataframe, status html)
    """
    session = app_state.get("session")
    if session is None or not row_id:
        gr.Warning("请先选择一行", duration=2.0)
        return app_state, session_dataframe(app_state), generate_status_html("⚠️ 请先选择一行", session)
    
    try:
        row = session.set_status(row_id, status)
    except RowNotFoundError:
        gr.Warning("该行已不存在，请重新选择", duration=2.0)
        return app_state, session_dataframe(app_state), generate_status_html("❌ 该行已不存在（可能已重新解析）", session)
    except ValueError as e:
        gr.Warning(str(e), duration=2.0)
        return app_state, session_dataframe(app_state), generate_status_html(f"❌ {str(e)}", session)
    
    return app_state, session_dataframe(app_state), generate_status_html(
        f"📌 状态已设为 {STATUS_LABELS[row.status.value]}", session
    )


def handle_accept(policy: str, app_state: Dict[str, Any]) -> Tuple[Dict[str, Any], pd.DataFrame, str]:
    """
    Accept the session: merge confirmed rows into the vocabulary and end it.
    
    Args:
        policy: Duplicate policy (overwrite/skip/keep_both)
        app_state: Current application state
    
    Returns:
        Tuple of (app_state, preview dataframe, status html)
    """
    from services import EntryMerger
    
    session = app_state.get("session")
    if session is None:
        gr.Warning("无数据可导入", duration=2.0)
        return app_state, session_dataframe(app_state), generate_status_html("⚠️ 无数据可导入")
    
    try:
        merger = EntryMerger(policy or app_state.get("duplicate_policy", "skip"))
        merger.add_session(session)
        result = merger.merge(app_state.get("vocabulary", []))
    except ValueError as e:
        gr.Warning(str(e), duration=2.0)
        return app_state, session_dataframe(app_state), generate_status_html(f"⚠️ {str(e)}", session)
    
    app_state["vocabulary"] = result.entries
    app_state["session"] = None
    logger.info(f"Session {session.id} accepted: {result.added} added, {result.skipped} skipped")
    
    gr.Info(f"已导入 {result.added} 个词条", duration=2.0)
    status = (
        f"🎉 导入完成: 新增/更新 {result.added}，跳过 {result.skipped}，"
        f"词库共 {len(result.entries)} 个"
    )
    return app_state, session_dataframe(app_state), generate_status_html(status)


def handle_discard(app_state: Dict[str, Any]) -> Tuple[Dict[str, Any], pd.DataFrame, str]:
    """Discard the active session without importing anything."""
    if app_state.get("session") is not None:
        logger.info(f"Session {app_state['session'].id} discarded")
    app_state["session"] = None
    return app_state, session_dataframe(app_state), generate_status_html("🗑️ 已放弃本次导入")
