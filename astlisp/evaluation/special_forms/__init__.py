"""Registry of special forms for the astlisp evaluator.

Maps head symbol names to handler functions that implement non-standard
evaluation rules. The evaluator consults this table before evaluating the
elements of a list, so a special form's operands are never evaluated eagerly.
"""

from astlisp.evaluation.special_forms.if_form import if_form

SPECIAL_FORMS = {
    "if": if_form,
}
