"""
Unit tests for ImportSession.

Tests session creation, reparsing, row edits, status overrides and
error conditions.
"""

import threading
import pytest
from models import (
    RowStatus,
    ParseMode,
    ParserSettings,
    InvalidModeError,
    RowNotFoundError,
    SourceTooLargeError,
)
from services import ImportSession, create_session


MIXED_TEXT = "apple\tりんご\nbanana\norange\tオレンジ"
ALTERNATING_TEXT = "cat\n猫\ndog\n犬"


def contents(rows):
    return [row.content() for row in rows]


class TestSessionCreation:
    """Test creating sessions from pasted text."""
    
    def test_delimiter_example(self):
        session = create_session(MIXED_TEXT, mode="delimiter")
        rows = session.rows
        
        assert len(rows) == 3
        assert (rows[0].term, rows[0].meaning) == ("apple", "りんご")
        assert rows[0].confidence == pytest.approx(0.9)
        assert rows[0].status is RowStatus.CONFIRMED
        assert (rows[1].term, rows[1].meaning) == ("banana", "")
        assert rows[1].confidence == pytest.approx(0.5)
        assert rows[1].status is RowStatus.CANDIDATE
        assert (rows[2].term, rows[2].meaning) == ("orange", "オレンジ")
        assert rows[2].status is RowStatus.CONFIRMED
    
    def test_alternating_example(self):
        session = create_session(ALTERNATING_TEXT, mode=ParseMode.ALTERNATING)
        
        assert [(r.term, r.meaning) for r in session.rows] == [("cat", "猫"), ("dog", "犬")]
        assert all(r.confidence == pytest.approx(0.85) for r in session.rows)
        assert all(r.status is RowStatus.CONFIRMED for r in session.rows)
    
    def test_blank_text_gives_empty_rows(self):
        session = create_session("   \n\n")
        
        assert session.rows == ()
        assert session.is_empty
    
    def test_none_text_treated_as_empty(self):
        assert create_session(None).is_empty
    
    def test_default_mode_is_auto(self):
        session = create_session(ALTERNATING_TEXT)
        
        assert session.mode is ParseMode.AUTO
        assert session.resolved_mode is ParseMode.ALTERNATING
    
    def test_auto_with_separator(self):
        session = create_session(MIXED_TEXT)
        
        assert session.resolved_mode is ParseMode.DELIMITER
        assert contents(session.rows) == contents(create_session(MIXED_TEXT, mode="delimiter").rows)
    
    def test_invalid_mode_rejected(self):
        with pytest.raises(InvalidModeError):
            create_session(MIXED_TEXT, mode="columns")
    
    def test_source_too_large(self):
        settings = ParserSettings(max_lines=2)
        with pytest.raises(SourceTooLargeError):
            create_session("a\nb\nc", settings=settings)
    
    def test_identity_fields(self):
        session = create_session(MIXED_TEXT)
        
        assert session.source_text == MIXED_TEXT
        assert session.id
        assert session.id != create_session(MIXED_TEXT).id
        with pytest.raises(AttributeError):
            session.created_at = None
        with pytest.raises(AttributeError):
            session.source_text = "other"
    
    def test_rows_snapshot_is_read_only(self):
        session = create_session(MIXED_TEXT)
        assert isinstance(session.rows, tuple)


class TestReparse:
    """Test reparse and mode changes."""
    
    def test_set_mode_replaces_ids(self):
        session = create_session(MIXED_TEXT)
        old_ids = {row.id for row in session.rows}
        
        session.set_mode("singleLine")
        
        assert session.mode is ParseMode.SINGLE_LINE
        assert old_ids.isdisjoint(row.id for row in session.rows)
        assert all(row.meaning == "" for row in session.rows)
    
    def test_reparse_discards_edits(self):
        session = create_session(MIXED_TEXT, mode="delimiter")
        banana = session.rows[1]
        session.update_row(banana.id, meaning="バナナ")
        
        session.reparse()
        
        assert session.rows[1].meaning == ""
        assert session.rows[1].status is RowStatus.CANDIDATE
    
    def test_reparse_is_idempotent_in_content(self):
        session = create_session(MIXED_TEXT)
        first = session.reparse()
        second = session.reparse()
        
        assert contents(first) == contents(second)
        assert {r.id for r in first}.isdisjoint(r.id for r in second)
    
    def test_set_mode_goes_through_reparse(self):
        from utils.performance import get_monitor
        
        session = create_session(MIXED_TEXT)
        get_monitor().clear()
        
        session.set_mode("alternating")
        
        assert get_monitor().get_stats("reparse")["count"] == 1
        assert session.resolved_mode is ParseMode.ALTERNATING
    
    def test_invalid_set_mode_changes_nothing(self):
        session = create_session(MIXED_TEXT, mode="delimiter")
        before = [row.id for row in session.rows]
        
        with pytest.raises(InvalidModeError):
            session.set_mode("bogus")
        
        assert session.mode is ParseMode.DELIMITER
        assert [row.id for row in session.rows] == before


class TestRowEdits:
    """Test update_row and set_status."""
    
    def test_manual_completion_confirms_and_keeps_confidence(self):
        session = create_session("apple\nbanana\ncherry", mode="singleLine")
        row = session.rows[0]
        
        updated = session.update_row(row.id, meaning="りんご")
        
        assert updated.status is RowStatus.CONFIRMED
        assert updated.confidence == pytest.approx(0.2)
        assert updated.source_line == "apple"
        assert updated.id == row.id
    
    def test_clearing_fields_unclassifies(self):
        session = create_session(MIXED_TEXT, mode="delimiter")
        row = session.rows[0]
        
        session.update_row(row.id, term="", meaning=" ")
        
        assert session.get_row(row.id).status is RowStatus.UNCLASSIFIED
        assert not session.get_row(row.id).is_resolved
    
    def test_partial_edit_only_changes_named_field(self):
        session = create_session(MIXED_TEXT, mode="delimiter")
        row = session.rows[0]
        
        session.update_row(row.id, term="green apple")
        
        edited = session.get_row(row.id)
        assert edited.term == "green apple"
        assert edited.meaning == "りんご"
    
    def test_set_status_override_until_next_edit(self):
        session = create_session(MIXED_TEXT, mode="delimiter")
        banana = session.rows[1]
        
        assert session.set_status(banana.id, "confirmed").status is RowStatus.CONFIRMED
        assert session.get_row(banana.id).status is RowStatus.CONFIRMED
        
        assert session.update_row(banana.id, term="banana").status is RowStatus.CANDIDATE
    
    def test_returned_rows_are_detached_copies(self):
        session = create_session(MIXED_TEXT, mode="delimiter")
        snapshot = session.rows[1]
        
        snapshot.term = "changed"
        snapshot.meaning = "バナナ"
        session.get_row(snapshot.id).status = RowStatus.UNCLASSIFIED
        
        live = session.get_row(snapshot.id)
        assert (live.term, live.meaning) == ("banana", "")
        assert live.status is RowStatus.CANDIDATE
        assert live.id == snapshot.id
    
    def test_set_status_invalid_value(self):
        session = create_session(MIXED_TEXT)
        with pytest.raises(ValueError, match="Invalid status"):
            session.set_status(session.rows[0].id, "rejected")
    
    def test_unknown_id_is_noop_failure(self):
        session = create_session(MIXED_TEXT)
        before = contents(session.rows)
        
        with pytest.raises(RowNotFoundError):
            session.update_row("missing", term="x")
        with pytest.raises(RowNotFoundError):
            session.set_status("missing", RowStatus.CONFIRMED)
        
        assert contents(session.rows) == before
    
    def test_stale_id_after_reparse(self):
        session = create_session(MIXED_TEXT)
        stale_id = session.rows[0].id
        session.reparse()
        
        with pytest.raises(RowNotFoundError):
            session.update_row(stale_id, meaning="x")


class TestSummaries:
    """Test status counters."""
    
    def test_status_counts(self):
        session = create_session(MIXED_TEXT, mode="delimiter")
        assert session.status_counts() == {"candidate": 1, "unclassified": 0, "confirmed": 2}
    
    def test_resolved_and_confirmed_rows(self):
        session = create_session(MIXED_TEXT, mode="delimiter")
        
        assert session.resolved_count() == 2
        assert [r.term for r in session.confirmed_rows()] == ["apple", "orange"]
    
    def test_confirmed_override_without_meaning_not_accepted(self):
        session = create_session(MIXED_TEXT, mode="delimiter")
        session.set_status(session.rows[1].id, "confirmed")
        assert [r.term for r in session.confirmed_rows()] == ["apple", "orange"]


class TestConcurrency:
    """Test mutations from several threads stay consistent."""
    
    def test_concurrent_edits_and_reparses(self):
        session = create_session("\n".join(f"word{i}\t意味{i}" for i in range(40)))
        errors = []
        
        def editor():
            for _ in range(50):
                for row in session.rows[:5]:
                    try:
                        session.update_row(row.id, term=row.term, meaning="")
                    except RowNotFoundError:
                        pass
                    except Exception as e:
                        errors.append(e)
        
        def reparser():
            for i in range(20):
                try:
                    session.set_mode("delimiter" if i % 2 else "auto")
                except Exception as e:
                    errors.append(e)
        
        threads = [threading.Thread(target=editor) for _ in range(3)]
        threads.append(threading.Thread(target=reparser))
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        
        assert errors == []
        assert len(session.rows) == 40
        assert len({row.id for row in session.rows}) == 40
