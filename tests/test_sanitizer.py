"""Tests for markup stripping, subject extraction and signature removal."""

from __future__ import annotations

import pytest

from cvflow.constants.labels import ENGLISH, FRENCH, SanitizerRules
from cvflow.errors import TextCoercionError
from cvflow.services.sanitizer import (
    clean_text,
    extract_subject,
    normalize_skill_list,
    prepare_letter,
    strip_signature,
)
from cvflow.utils.text import coerce_text


class _Unprintable:
    def __str__(self) -> str:
        raise RuntimeError("boom")


class TestCoerceText:
    def test_none_is_empty(self) -> None:
        assert coerce_text(None) == ""

    def test_numbers_are_stringified(self) -> None:
        assert coerce_text(2024) == "2024"
        assert coerce_text(3.5) == "3.5"

    def test_failure_raises_coercion_error(self) -> None:
        with pytest.raises(TextCoercionError):
            coerce_text(_Unprintable())


class TestCleanText:
    def test_removes_bold_markers(self) -> None:
        assert clean_text("a **bold** and __strong__ word") == "a bold and strong word"

    def test_removes_italic_pairs(self) -> None:
        assert clean_text("some *emphasis* here") == "some emphasis here"

    def test_keeps_list_asterisks_and_underscored_identifiers(self) -> None:
        assert clean_text("* item with snake_case_name") == "* item with snake_case_name"

    def test_removes_heading_markers_on_every_line(self) -> None:
        assert clean_text("# Title\nbody\n### Sub") == "Title\nbody\nSub"

    def test_trims(self) -> None:
        assert clean_text("  padded \n") == "padded"

    def test_coerces_non_strings(self) -> None:
        assert clean_text(42) == "42"
        assert clean_text(None) == ""


class TestNormalizeSkillList:
    def test_newlines_become_commas(self) -> None:
        assert normalize_skill_list("Python\nSQL\n  Docker") == "Python, SQL, Docker"

    def test_space_before_comma_removed(self) -> None:
        assert normalize_skill_list("Python , SQL") == "Python, SQL"

    def test_blank_is_empty(self) -> None:
        assert normalize_skill_list("  \n ") == ""


class TestExtractSubject:
    def test_extracts_labeled_line_and_removes_it(self) -> None:
        body = "Objet : Candidature au poste de Data Engineer\n\nMadame, Monsieur,\nTexte."
        subject, rest = extract_subject(body, "Data Engineer", "Jane Doe", FRENCH)

        assert subject == "Objet : Candidature au poste de Data Engineer"
        assert rest == "Madame, Monsieur,\nTexte."

    def test_default_subject_from_job_title(self) -> None:
        subject, rest = extract_subject("Madame, Monsieur,", "Data Engineer", "Jane Doe", FRENCH)

        assert subject == "Objet : Candidature pour le poste de Data Engineer"
        assert rest == "Madame, Monsieur,"

    def test_label_must_start_the_line(self) -> None:
        body = "Je vous écris. Objet : rien\nSuite."
        subject, rest = extract_subject(body, "Dev", "", FRENCH)

        assert subject == "Objet : Candidature pour le poste de Dev"
        assert rest == body

    def test_strips_unsolicited_prefix(self) -> None:
        body = "Objet : Candidature Spontanée – Alternance Data\nCorps."
        subject, _ = extract_subject(body, "Data", "Jane Doe", FRENCH)

        assert subject == "Objet : Alternance Data"

    def test_strips_unsolicited_prefix_with_connector(self) -> None:
        body = "Objet : Candidature spontanée pour le poste de Développeur\nCorps."
        subject, _ = extract_subject(body, "x", "", FRENCH)

        assert subject == "Objet : Développeur"

    def test_strips_trailing_candidate_name(self) -> None:
        body = "Objet: Alternance Data Engineer - Jane  Doe\nCorps."
        subject, _ = extract_subject(body, "x", "Jane Doe", FRENCH)

        assert subject == "Objet : Alternance Data Engineer"

    def test_empty_subject_falls_back_to_default(self) -> None:
        body = "Objet : Candidature Spontanée –\nCorps."
        subject, _ = extract_subject(body, "Analyste", "", FRENCH)

        assert subject == "Objet : Candidature pour le poste de Analyste"

    def test_english_labels(self) -> None:
        body = "Subject: Backend Engineer application\nDear team,"
        subject, rest = extract_subject(body, "x", "", ENGLISH)

        assert subject == "Subject: Backend Engineer application"
        assert rest == "Dear team,"


class TestStripSignature:
    def test_drops_contact_lines_around_trailing_name(self) -> None:
        body = (
            "Dear team,\nI would love to join.\nThank you."
            "\n\njane@example.com\n+1 555 0100\nJane Doe"
        )

        result = strip_signature(body, "Jane Doe", ENGLISH.rules)

        assert result.endswith("Jane Doe")
        assert "jane@example.com" not in result
        assert "+1 555 0100" not in result
        assert result.startswith("Dear team,\nI would love to join.\nThank you.")

    def test_closing_salutation_stops_dropping(self) -> None:
        body = (
            "Texte de la lettre.\n"
            "Cordialement,\n"
            "Jane Doe\n"
            "jane@example.com\n"
            "06 12 34 56 78\n"
            "https://janedoe.dev\n"
        )

        result = strip_signature(body, "Jane Doe", FRENCH.rules)

        assert result == "Texte de la lettre.\nCordialement,\nJane Doe"

    def test_lines_above_anchor_are_kept_verbatim(self) -> None:
        body = "Reach me at jane@example.com any time.\n\nSincerely,\nJane Doe\nwww.janedoe.dev"

        result = strip_signature(body, "Jane Doe", ENGLISH.rules)

        assert result == "Reach me at jane@example.com any time.\n\nSincerely,\nJane Doe"

    def test_without_anchor_tail_is_retained(self) -> None:
        body = "First paragraph.\nLast sentence of the letter."

        assert strip_signature(body, "Jane Doe", ENGLISH.rules) == body

    def test_short_ambiguous_line_is_kept(self) -> None:
        body = "Body text.\nMerci.\njane@example.com"

        assert strip_signature(body, "Jane Doe", FRENCH.rules) == "Body text.\nMerci."

    def test_name_matching_is_case_insensitive(self) -> None:
        body = "Body.\nJANE DOE\n+33 6 12 34 56 78"

        assert strip_signature(body, "Jane Doe", FRENCH.rules) == "Body.\nJANE DOE"

    def test_custom_contact_patterns(self) -> None:
        rules = SanitizerRules(
            subject_labels=("Subject",),
            closing_tokens=("Regards",),
            contact_patterns=(r"Tel\.\s*\d+",),
        )
        body = "Body.\nmail@example.com\nTel. 12"

        assert strip_signature(body, "", rules) == "Body.\nmail@example.com"

    def test_empty_body(self) -> None:
        assert strip_signature("", "Jane Doe", FRENCH.rules) == ""

    def test_sentence_mentioning_email_above_name_is_kept(self) -> None:
        body = "Dear team,\nYou can reach me at jane@example.com to talk further.\nJane Doe"

        assert strip_signature(body, "Jane Doe", ENGLISH.rules) == body

    def test_last_line_with_year_range_is_kept(self) -> None:
        body = "Madame,\nJ'ai travaillé chez Acme de 2019 - 2023 en tant que développeuse."

        assert strip_signature(body, "Jane Doe", FRENCH.rules) == body

    def test_labelled_contact_lines_are_dropped(self) -> None:
        body = (
            "Cordialement,\n"
            "Jane Doe\n"
            "Tél. : 06 12 34 56 78 | E-mail : jane@example.com\n"
            "LinkedIn : https://linkedin.com/in/janedoe"
        )

        assert strip_signature(body, "Jane Doe", FRENCH.rules) == "Cordialement,\nJane Doe"

    @pytest.mark.parametrize(
        ("line", "dropped"),
        [
            ("+1 555 0100", True),
            ("06 12 34 56 78", True),
            ("(514) 555-0199 • jane@example.com", True),
            ("www.janedoe.dev", True),
            ("2019 - 2023", False),
            ("Merci pour votre temps.", False),
        ],
    )
    def test_trailing_line_classification(self, line: str, dropped: bool) -> None:
        body = f"Texte.\n{line}"
        expected = "Texte." if dropped else body

        assert strip_signature(body, "", FRENCH.rules) == expected


class TestPrepareLetter:
    def test_full_cleanup(self) -> None:
        raw = (
            "**Objet : Candidature Spontanée – Data Engineer – Jane Doe**\n\n"
            "Madame, Monsieur,\n\n"
            "Je souhaite **rejoindre** votre équipe.\n\n"
            "Cordialement,\n"
            "Jane Doe\n"
            "jane@example.com"
        )

        letter = prepare_letter(raw, "Data Engineer", "Jane Doe", FRENCH)

        assert letter.subject == "Objet : Data Engineer"
        assert "**" not in letter.body
        assert letter.body.startswith("Madame, Monsieur,")
        assert letter.body.endswith("Cordialement,\nJane Doe")
