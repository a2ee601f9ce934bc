import unittest

from application.use_cases.browse import find_entry, list_categories, select_categories, toggle_question
from domain.entities import CategorySummary, FaqCategory, FaqEntry

CORPUS = [
    FaqCategory(
        id="account",
        name="Account",
        entries=(
            FaqEntry(id="1", question="How do I reset my password?", answer="Use the forgot password link."),
            FaqEntry(id="2", question="How do I verify my email?", answer="Enter the code we sent."),
        ),
    ),
    FaqCategory(id="empty", name="Empty"),
]


class TestBrowse(unittest.TestCase):
    def test_list_categories(self):
        self.assertEqual(
            list_categories(CORPUS),
            [
                CategorySummary(id="account", name="Account", entry_count=2),
                CategorySummary(id="empty", name="Empty", entry_count=0),
            ],
        )

    def test_select_all_categories(self):
        self.assertEqual(select_categories(CORPUS), CORPUS)

    def test_select_single_category(self):
        self.assertEqual(select_categories(CORPUS, "empty"), [CORPUS[1]])

    def test_select_unknown_category(self):
        self.assertEqual(select_categories(CORPUS, "missing"), [])

    def test_toggle_question_keeps_other_open_questions(self):
        opened = toggle_question(set(), "1")
        both = toggle_question(opened, "2")

        self.assertEqual(opened, {"1"})
        self.assertEqual(both, {"1", "2"})
        self.assertEqual(toggle_question(both, "1"), {"2"})

    def test_toggle_question_does_not_mutate_input(self):
        current = {"1"}
        toggle_question(current, "1")
        self.assertEqual(current, {"1"})

    def test_find_entry(self):
        found = find_entry(CORPUS, "2")
        self.assertIsNotNone(found)
        assert found is not None
        self.assertEqual(found.category_id, "account")
        self.assertEqual(found.question, "How do I verify my email?")
        self.assertEqual(found.score, 0)
        self.assertIsNone(find_entry(CORPUS, "99"))


if __name__ == "__main__":
    unittest.main()
