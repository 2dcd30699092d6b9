"""
Tests for GrowthSession

Test strategy:
1. Each command returns exactly the display strings the UI must redraw
2. Rejected purchases redraw nothing and leave the state unchanged
3. Commands from many threads are serialized by the session lock
"""

import threading

import pytest

from idlegrowth.audit import EventLogger
from idlegrowth.config import GameSettings
from idlegrowth.models.events import GrowthEventType
from idlegrowth.models.state import GrowthState
from idlegrowth.orchestrator import (
    DisplayUpdate,
    GrowthCommand,
    GrowthSession,
    create_session,
)


@pytest.fixture
def event_logger():
    return EventLogger(history_size=50)


@pytest.fixture
def session(event_logger):
    return GrowthSession(event_logger=event_logger)


class TestIncreaseCounter:
    """Tests for the grow command."""
    
    def test_counter_display_after_grow(self, session):
        """Test that growing redraws only the counter."""
        update = session.increase_counter()
        
        assert update.command == GrowthCommand.INCREASE_COUNTER
        assert update.accepted is True
        assert update.counter == "2"
        assert update.multiplier is None
        assert update.base is None
    
    def test_counter_display_uses_notation(self):
        """Test that large counters come back in compact notation."""
        session = GrowthSession(state=GrowthState(counter=1234566))
        update = session.increase_counter()
        assert update.counter == "1.2345e6"


class TestIncreaseMultiplier:
    """Tests for the multiplier purchase command."""
    
    def test_accepted_purchase_redraws_counter_and_multiplier(self, session):
        """Test a successful purchase from the default state."""
        update = session.increase_multiplier()
        
        assert update.accepted is True
        assert update.counter == "0"
        assert update.multiplier == "2"
        assert update.base is None
    
    def test_rejected_purchase_redraws_nothing(self, session):
        """Test that a rejected purchase carries no display values."""
        session.increase_multiplier()
        update = session.increase_multiplier()
        
        assert update.accepted is False
        assert update.has_changes is False
        assert session.snapshot() == GrowthState(counter=0, multiplier=2)


class TestIncreaseBase:
    """Tests for the base purchase command."""
    
    def test_accepted_purchase_redraws_counter_and_base(self):
        """Test that 1000 buys a tier and redraws counter and base."""
        session = GrowthSession(state=GrowthState(counter=1000))
        update = session.increase_base()
        
        assert update.accepted is True
        assert update.counter == "0"
        assert update.base == "2"
        assert update.multiplier is None
    
    def test_rejected_purchase_leaves_state(self):
        """Test that 850 is not enough and nothing changes."""
        session = GrowthSession(state=GrowthState(counter=850))
        update = session.increase_base()
        
        assert update.accepted is False
        assert update.has_changes is False
        assert session.snapshot() == GrowthState(counter=850)


class TestDisplay:
    """Tests for the full refresh."""
    
    def test_initial_display(self, session):
        """Test that the first render shows all three values."""
        update = session.display()
        
        assert update == DisplayUpdate(
            command=GrowthCommand.REFRESH,
            accepted=True,
            counter="1",
            multiplier="1",
            base="1",
        )
    
    def test_has_changes(self):
        """Test has_changes for a refresh, a grow and a rejection."""
        refresh = DisplayUpdate(
            command=GrowthCommand.REFRESH,
            accepted=True,
            counter="1",
            multiplier="1",
            base="1",
        )
        grow = DisplayUpdate(
            command=GrowthCommand.INCREASE_COUNTER,
            accepted=True,
            counter="2",
        )
        rejected = DisplayUpdate(
            command=GrowthCommand.INCREASE_BASE,
            accepted=False,
        )
        assert refresh.has_changes is True
        assert grow.has_changes is True
        assert rejected.has_changes is False
    
    def test_snapshot_is_a_copy(self, session):
        """Test that the snapshot cannot mutate the session."""
        copy = session.snapshot()
        copy.update_counter()
        assert session.snapshot().counter == 1


class TestEvents:
    """Tests for events logged by the session."""
    
    def test_each_command_logs_one_event(self, session, event_logger):
        """Test the event type for every command outcome."""
        session.increase_counter()      # counter 2
        session.increase_multiplier()   # counter 1, multiplier 2
        session.increase_multiplier()   # rejected
        session.increase_base()         # rejected
        
        types = [event.event_type for event in event_logger.recent()]
        assert types == [
            GrowthEventType.BASE_REJECTED,
            GrowthEventType.MULTIPLIER_REJECTED,
            GrowthEventType.MULTIPLIER_PURCHASED,
            GrowthEventType.COUNTER_INCREASED,
        ]
    
    def test_events_carry_session_id(self, session, event_logger):
        """Test that events are tagged with the session that made them."""
        session.increase_counter()
        event = event_logger.recent()[0]
        assert event.session_id == session.session_id
    
    def test_purchase_event_records_cost(self, session, event_logger):
        """Test that the multiplier cost is the value before the purchase."""
        session.increase_multiplier()
        event = event_logger.recent()[0]
        assert event.details["cost"] == "1"
        assert event.details["multiplier"] == "2"
    
    def test_session_without_logger(self):
        """Test that a session with no logger still runs every command."""
        session = GrowthSession()
        session.increase_counter()
        session.increase_multiplier()
        session.increase_base()
        assert session.event_logger is None


class TestConcurrency:
    """Tests for command serialization."""
    
    def test_parallel_grows_are_not_lost(self):
        """Test that concurrent grows all land exactly once."""
        session = GrowthSession()
        threads = [
            threading.Thread(
                target=lambda: [session.increase_counter() for _ in range(250)]
            )
            for _ in range(8)
        ]
        
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        
        assert session.snapshot().counter == 1 + 8 * 250
    
    def test_parallel_purchases_never_overspend(self):
        """Test that concurrent purchases never take the counter negative."""
        session = GrowthSession(state=GrowthState(counter=10))
        results = []
        
        def buy():
            for _ in range(10):
                results.append(session.increase_multiplier().accepted)
        
        threads = [threading.Thread(target=buy) for _ in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        
        state = session.snapshot()
        # 1 + 2 + 3 + 4 = 10 buys multipliers up to 5
        assert results.count(True) == 4
        assert state.counter == 0
        assert state.multiplier == 5
    
    def test_event_history_follows_command_order(self):
        """Test that concurrent commands are recorded in the order they ran."""
        event_logger = EventLogger(history_size=1000)
        session = GrowthSession(event_logger=event_logger)
        
        threads = [
            threading.Thread(
                target=lambda: [session.increase_counter() for _ in range(100)]
            )
            for _ in range(8)
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        
        history = list(reversed(event_logger.recent()))
        counters = [int(event.details["counter"]) for event in history]
        assert counters == list(range(2, 2 + 8 * 100))
        
        timestamps = [event.timestamp for event in history]
        assert timestamps == sorted(timestamps)


class TestCreateSession:
    """Tests for the factory."""
    
    def test_factory_wires_logger(self):
        """Test that create_session attaches a logger sized from settings."""
        settings = GameSettings(event_history_size=2)
        session = create_session(settings=settings)
        
        for _ in range(5):
            session.increase_counter()
        
        assert session.event_logger is not None
        assert len(session.event_logger.recent()) == 2
    
    def test_factory_accepts_starting_state(self):
        """Test that create_session keeps a given starting state."""
        session = create_session(
            settings=GameSettings(),
            state=GrowthState(counter=1000),
        )
        assert session.increase_base().accepted is True


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
