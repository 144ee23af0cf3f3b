import unittest

from cgpacalc.core.ledger import ADDED_MESSAGE, REMOVED_MESSAGE
from cgpacalc.state.app_state import AppState


class AppStateTests(unittest.TestCase):
    def test_each_session_owns_a_ledger(self):
        first, second = AppState(), AppState()
        first.ledger.add()
        self.assertEqual(len(first.ledger), 2)
        self.assertEqual(len(second.ledger), 1)

    def test_confirmation_messages(self):
        state = AppState()
        self.assertIsNone(state.last_message)

        state.apply(state.ledger.add())
        self.assertEqual(state.last_message, ADDED_MESSAGE)

        state.apply(state.ledger.remove(state.ledger.courses[-1].id))
        self.assertEqual(state.last_message, REMOVED_MESSAGE)

    def test_message_cleared_by_later_edit(self):
        state = AppState()
        state.apply(state.ledger.add())
        self.assertEqual(state.last_message, ADDED_MESSAGE)

        state.apply(state.ledger.update(state.ledger.courses[-1].id, "name", "Biology"))

        self.assertIsNone(state.last_message)

    def test_refused_remove_shows_no_message(self):
        state = AppState()
        state.apply(state.ledger.add())
        state.apply(state.ledger.remove(state.ledger.courses[0].id))

        change = state.apply(state.ledger.remove(state.ledger.courses[0].id))

        self.assertFalse(change.changed)
        self.assertIsNone(state.last_message)
        self.assertEqual(len(state.ledger), 1)


if __name__ == "__main__":
    unittest.main()
