import unittest
from unittest.mock import MagicMock

from brainstorm_v1.helpers import completion
from brainstorm_v1.helpers.errors import CompletionError


def make_llm(content):
    llm = MagicMock()
    llm.chat.completions.create.return_value.choices = [
        MagicMock(message=MagicMock(content=content))
    ]
    return llm


class TestGetCompletion(unittest.TestCase):
    def test_returns_first_choice_verbatim(self) -> None:
        llm = make_llm("  Q1. Explain recursion. (10 marks)\n")

        content = completion.getCompletion(llm, "CS101", "Intro to Programming")

        self.assertEqual(content, "  Q1. Explain recursion. (10 marks)\n")

    def test_sends_fixed_model_and_sampling(self) -> None:
        llm = make_llm("Q1. Explain...")

        completion.getCompletion(llm, "CS101", "Intro to Programming")

        kwargs = llm.chat.completions.create.call_args.kwargs
        self.assertEqual(kwargs["model"], "gpt-4-turbo")
        self.assertEqual(kwargs["temperature"], 0.7)
        self.assertEqual(kwargs["max_tokens"], 500)

    def test_messages_carry_system_prompt_and_unit(self) -> None:
        messages = completion.makeMessages("CS101", "Intro to Programming")

        self.assertEqual(messages[0]["role"], "system")
        self.assertIn("university professor", messages[0]["content"])
        self.assertIn("40 marks", messages[0]["content"])
        self.assertEqual(
            messages[1],
            {"role": "user", "content": "Unit Code: CS101, Unit Name: Intro to Programming"},
        )

    def test_provider_failure_raises_completion_error(self) -> None:
        llm = MagicMock()
        llm.chat.completions.create.side_effect = ConnectionError("network down")

        with self.assertRaises(CompletionError) as ctx:
            completion.getCompletion(llm, "CS101", "Intro to Programming")

        self.assertIsInstance(ctx.exception.__cause__, ConnectionError)
        self.assertEqual(ctx.exception.step, "completion")
        self.assertIn("network down", str(ctx.exception))

    def test_missing_client_raises_completion_error(self) -> None:
        with self.assertRaises(CompletionError):
            completion.getCompletion(None, "CS101", "Intro to Programming")

    def test_empty_choice_raises_completion_error(self) -> None:
        with self.assertRaises(CompletionError):
            completion.getCompletion(make_llm(None), "CS101", "Intro to Programming")

        llm = MagicMock()
        llm.chat.completions.create.return_value.choices = []
        with self.assertRaises(CompletionError):
            completion.getCompletion(llm, "CS101", "Intro to Programming")
