"""
Form body encoding for the SendGrid v2 mail.send endpoint.

The API expects ``application/x-www-form-urlencoded`` with a fixed field
order. Collection fields use PHP-style bracket keys (``to[]``,
``files[name]``); the brackets are percent-escaped along with everything
else, so they go over the wire as ``%5B``/``%5D``.

Reference: https://sendgrid.com/docs/API_Reference/Web_API/mail.html
"""
from __future__ import annotations

import logging
from typing import List, Optional, Tuple
from urllib.parse import quote_plus, urlencode

from ..errors import EncodingError
from ..models import Mail

logger = logging.getLogger(__name__)


# Left unescaped in addition to quote_plus defaults, matching the WHATWG form serializer
_FORM_SAFE = "*"


def _quote_form(value: str, safe: str, encoding: Optional[str], errors: Optional[str]) -> str:
    # quote_plus always leaves "~" literal; the form serializer escapes it
    return quote_plus(value, safe, encoding, errors).replace("~", "%7E")


def make_form_key(form: str, key: str) -> str:
    return f"{form}[{key}]"


def _pairs(mail: Mail) -> List[Tuple[str, str]]:
    pairs: List[Tuple[str, str]] = []
    pairs.extend(("to[]", to) for to in mail.to)
    pairs.extend(("toname[]", name) for name in mail.to_names)
    pairs.extend(("cc[]", cc) for cc in mail.cc)
    pairs.extend(("bcc[]", bcc) for bcc in mail.bcc)

    for filename, contents in mail.attachments.items():
        pairs.append((make_form_key("files", filename), contents))
    for content_id, value in mail.content.items():
        pairs.append((make_form_key("content", content_id), value))

    pairs.extend([
        ("from", mail.from_),
        ("subject", mail.subject),
        ("html", mail.html),
        ("text", mail.text),
        ("fromname", mail.from_name),
        ("replyto", mail.reply_to),
        ("date", mail.date),
        ("headers", mail.make_header_string()),
        ("x-smtpapi", mail.x_smtpapi),
    ])
    return pairs


def make_post_body(mail: Mail) -> str:
    """
    Encode ``mail`` as the form body of a mail.send request.

    The mail is only read, so encoding the same mail twice gives the same
    body. Every scalar field is emitted even when empty.

    Raises:
        EncodingError: if the headers cannot be rendered as JSON text or any
            field cannot be encoded as UTF-8. No partial body is returned.
    """
    try:
        pairs = _pairs(mail)
        return urlencode(pairs, safe=_FORM_SAFE, quote_via=_quote_form)
    except EncodingError as e:
        logger.warning("mail_encode_error", extra={"error": str(e)})
        raise
    except UnicodeEncodeError as e:
        logger.warning("mail_encode_error", extra={"error": str(e)})
        raise EncodingError(f"mail field cannot be encoded: {e}") from e
