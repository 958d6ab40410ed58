"""Services

The document generator is imported from its own module
(``cvflow.services.document_generator``) because it depends on the layout
package, which itself uses the sanitizer exported here.
"""

from cvflow.services.assembler import assemble_cv, assemble_letter
from cvflow.services.fpdf_backend import FpdfCanvas
from cvflow.services.sanitizer import (
    LetterText,
    clean_text,
    extract_subject,
    prepare_letter,
    strip_signature,
)

__all__ = [
    "FpdfCanvas",
    "LetterText",
    "assemble_cv",
    "assemble_letter",
    "clean_text",
    "extract_subject",
    "prepare_letter",
    "strip_signature",
]
