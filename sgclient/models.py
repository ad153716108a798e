from __future__ import annotations
import json
import os
from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field

from .errors import EncodingError


class Mail(BaseModel):
    """A single outbound message for the v2 mail.send endpoint.

    Built empty and filled in with the ``add_*`` methods, each of which
    returns the mail so calls can be chained. Nothing is validated here;
    every field is sent as-is.
    """

    model_config = ConfigDict(populate_by_name=True)

    to: List[str] = Field(default_factory=list)
    to_names: List[str] = Field(default_factory=list)
    cc: List[str] = Field(default_factory=list)
    bcc: List[str] = Field(default_factory=list)
    from_: str = Field(default="", alias="from")
    from_name: str = ""
    reply_to: str = ""
    subject: str = ""
    html: str = ""
    text: str = ""
    date: str = ""
    attachments: Dict[str, str] = Field(default_factory=dict)
    content: Dict[str, str] = Field(default_factory=dict)
    headers: Dict[str, str] = Field(default_factory=dict)
    x_smtpapi: str = ""

    def add_to(self, address: str) -> Mail:
        self.to.append(address)
        return self

    def add_to_name(self, name: str) -> Mail:
        self.to_names.append(name)
        return self

    def add_cc(self, address: str) -> Mail:
        self.cc.append(address)
        return self

    def add_bcc(self, address: str) -> Mail:
        self.bcc.append(address)
        return self

    def add_from(self, address: str) -> Mail:
        self.from_ = address
        return self

    def add_from_name(self, name: str) -> Mail:
        self.from_name = name
        return self

    def add_reply_to(self, address: str) -> Mail:
        self.reply_to = address
        return self

    def add_subject(self, subject: str) -> Mail:
        self.subject = subject
        return self

    def add_html(self, html: str) -> Mail:
        self.html = html
        return self

    def add_text(self, text: str) -> Mail:
        self.text = text
        return self

    def add_date(self, date: str) -> Mail:
        self.date = date
        return self

    def add_x_smtpapi(self, value: str) -> Mail:
        self.x_smtpapi = value
        return self

    def add_attachment(self, filename: str, content: str) -> Mail:
        self.attachments[filename] = content
        return self

    def attach_file(self, path: str | os.PathLike[str]) -> Mail:
        """Read ``path`` as UTF-8 text and attach it under its base filename."""
        with open(path, "r", encoding="utf-8") as fh:
            data = fh.read()
        return self.add_attachment(os.path.basename(os.fspath(path)), data)

    def add_content(self, content_id: str, value: str) -> Mail:
        self.content[content_id] = value
        return self

    def add_header(self, name: str, value: str) -> Mail:
        self.headers[name] = value
        return self

    def make_header_string(self) -> str:
        """Render ``headers`` as compact JSON object text, ``{}`` when empty."""
        try:
            rendered = json.dumps(self.headers, ensure_ascii=False, separators=(",", ":"))
            # Lone surrogates survive json.dumps but are not valid text
            rendered.encode("utf-8")
        except (TypeError, ValueError) as e:
            raise EncodingError(f"headers cannot be serialized: {e}") from e
        return rendered
