"""
Tests for raw email decoding.
"""

from orchestrator.email_decoder import decode_email

from conftest import FORWARDED_TEXT, NOTIFICATION_HTML, build_raw_email


class TestDecodeEmail:
    def test_multipart_alternative(self, raw_email):
        email = decode_email(raw_email)
        assert email.subject == "Fwd: Transaksi Kartu Kredit"
        assert email.sender.name == "Me"
        assert email.sender.address == "me@example.com"
        assert email.text.strip() == FORWARDED_TEXT.strip()
        assert email.html.strip() == NOTIFICATION_HTML

    def test_html_only(self):
        email = decode_email(build_raw_email(text=None))
        assert email.text is None
        assert "Nominal : Rp 50.000" in email.html

    def test_plain_text_only_from_string(self):
        raw = (
            "From: alerts@bank.co.id\r\n"
            "Subject: Transaksi\r\n"
            "Content-Type: text/plain; charset=utf-8\r\n"
            "\r\n"
            "Nominal: Rp 10.000\r\n"
        )
        email = decode_email(raw)
        assert email.sender.address == "alerts@bank.co.id"
        assert email.sender.name == ""
        assert email.html is None
        assert "Nominal: Rp 10.000" in email.text

    def test_missing_headers(self):
        email = decode_email(b"\r\nhello\r\n")
        assert email.subject is None
        assert email.sender is None
