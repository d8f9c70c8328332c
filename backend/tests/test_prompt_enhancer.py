"""Tests for the presentation-request enhancer (pure functions, no I/O)."""

from app.i18n import Language
from app.schemas.chat import ChatMessage
from app.services.prompt_enhancer import (
    enhance_content,
    enhance_messages,
    extract_slide_count,
    is_presentation_request,
)


def _conversation(last: str) -> list[ChatMessage]:
    return [
        ChatMessage(role="user", content="Hi! I teach biology in 9-A."),
        ChatMessage(role="assistant", content="Great, how can I help?"),
        ChatMessage(role="user", content=last),
    ]


class TestDetection:
    """Presentation keyword detection."""

    def test_english_keywords(self):
        """English keywords are detected in any case."""
        assert is_presentation_request("Make me a Presentation about cells")
        assert is_presentation_request("I need SLIDES on photosynthesis")

    def test_russian_keywords(self):
        """Russian keywords are detected."""
        assert is_presentation_request("Сделай презентацию по биологии")
        assert is_presentation_request("Нужно 7 слайдов про клетку")

    def test_unrelated_text(self):
        """Other requests are not presentations."""
        assert not is_presentation_request("Create a lesson plan about fractions")


class TestSlideCount:
    """Slide count parsing."""

    def test_explicit_count(self):
        """An explicit count is returned."""
        assert extract_slide_count("a presentation with 5 slides") == 5
        assert extract_slide_count("12 SLIDES about volcanoes") == 12

    def test_singular_and_no_space(self):
        """Singular form and missing space are accepted."""
        assert extract_slide_count("just 1 slide please") == 1
        assert extract_slide_count("8slides on rivers") == 8

    def test_russian_count(self):
        """Russian slide words carry the count too."""
        assert extract_slide_count("Презентация на 10 слайдов") == 10
        assert extract_slide_count("нужно 3 слайда") == 3

    def test_missing_count_defaults_to_five(self):
        """Without a count the default of 5 is used."""
        assert extract_slide_count("make me a presentation") == 5

    def test_number_not_followed_by_slides_is_ignored(self):
        """Numbers unrelated to slides are ignored."""
        assert extract_slide_count("presentation for grade 9, with slides") == 5

    def test_zero_falls_back_to_default(self):
        """A count of 0 falls back to the default."""
        assert extract_slide_count("0 slides") == 5

    def test_custom_default(self):
        """An explicit default overrides the setting."""
        assert extract_slide_count("a presentation", default=8) == 8

    def test_large_count_is_clamped(self):
        """Counts above the maximum are clamped to it."""
        assert extract_slide_count("150 slides") == 100
        assert extract_slide_count("make 2000000 slides") == 100
        assert extract_slide_count("100 slides") == 100

    def test_huge_digit_string_is_clamped(self):
        """Thousands of digits still clamp to the maximum."""
        assert extract_slide_count("9" * 5000 + " slides") == 100

    def test_leading_zeros(self):
        """Leading zeros do not change the count."""
        assert extract_slide_count("0007 slides") == 7


class TestEnhanceContent:
    """Instruction block appended to a presentation request."""

    def test_instructs_exact_numbered_slides(self):
        """The block lists exactly N numbered slides."""
        result = enhance_content("Make a presentation with 5 slides about the water cycle", Language.EN)

        assert result.slide_count == 5
        assert result.content.startswith("Make a presentation with 5 slides about the water cycle")
        for n in range(1, 6):
            assert f"Slide {n}:" in result.content
        assert "Slide 6:" not in result.content
        assert "exactly 5" in result.content

    def test_russian_instruction(self):
        """Russian requests get the Russian block."""
        result = enhance_content("Сделай презентацию", Language.RU)

        assert result.slide_count == 5
        assert "Слайд 5:" in result.content
        assert "Слайд 6:" not in result.content
        assert "НЕ ОСТАНАВЛИВАЙСЯ" in result.content

    def test_outline_is_bounded(self):
        """A huge requested count yields an outline of the maximum size."""
        result = enhance_content("make 2000000 slides", Language.EN)

        assert result.slide_count == 100
        assert "Slide 100:" in result.content
        assert "Slide 101:" not in result.content


class TestEnhanceMessages:
    """Rewriting the last message of a conversation."""

    def test_rewrites_only_last_message(self):
        """Only the last message is rewritten."""
        messages = _conversation("Please prepare 5 slides on mitosis")
        out = enhance_messages(messages, Language.EN)

        assert len(out) == len(messages)
        assert out[:-1] == messages[:-1]
        assert out[-1].role == "user"
        assert out[-1].content.startswith("Please prepare 5 slides on mitosis")
        assert "Slide 5:" in out[-1].content

    def test_does_not_mutate_input(self):
        """The caller's messages are left untouched."""
        messages = _conversation("Make me a presentation")
        snapshot = [m.content for m in messages]

        out = enhance_messages(messages, Language.EN)

        assert out is not messages
        assert [m.content for m in messages] == snapshot

    def test_default_count_when_unspecified(self):
        """Without a count the outline has 5 slides."""
        out = enhance_messages(_conversation("make me a presentation"), Language.EN)
        assert "Slide 5:" in out[-1].content
        assert "Slide 6:" not in out[-1].content

    def test_non_presentation_request_unchanged(self):
        """Other requests pass through unchanged."""
        messages = _conversation("Create a test about the French revolution")
        out = enhance_messages(messages, Language.EN)

        assert out == messages
        assert out[-1].content == "Create a test about the French revolution"

    def test_last_message_from_assistant_unchanged(self):
        """An assistant message is never rewritten."""
        messages = [
            ChatMessage(role="user", content="hello"),
            ChatMessage(role="assistant", content="Here are 5 slides for you"),
        ]
        assert enhance_messages(messages, Language.EN) == messages

    def test_empty_conversation(self):
        """An empty conversation stays empty."""
        assert enhance_messages([], Language.EN) == []
