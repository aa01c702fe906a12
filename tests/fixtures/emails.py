"""
Sample email data for testing.

This module contains various .eml file samples as bytes for testing:
- Plain text and HTML-only emails
- multipart/alternative, multipart/mixed and multipart/related emails
- Nested containers, attachments and embedded (cid) resources
- Encoded-word headers, including unsupported charsets
- Malformed content types, dispositions, dates and addresses
"""

# Simple plain text email
SIMPLE_PLAIN_TEXT_EML = b"""From: sender@example.com
To: recipient@example.com
Subject: Test Email
Date: Wed, 12 Feb 2026 10:30:00 +0100
Message-ID: <test123@example.com>
Content-Type: text/plain; charset="utf-8"

Hello, this is a simple test email.

Thank you.
"""

# Multipart email with HTML and plain text
MULTIPART_HTML_EML = b"""From: newsletter@example.com
To: subscriber@example.com
Subject: Monthly Newsletter
Date: Wed, 12 Feb 2026 16:00:00 +0100
Message-ID: <newsletter-123@example.com>
MIME-Version: 1.0
Content-Type: multipart/alternative; boundary="boundary123"

--boundary123
Content-Type: text/plain; charset="utf-8"

This is the plain text version of the newsletter.

--boundary123
Content-Type: text/html; charset="utf-8"

<h1>This is the HTML version</h1>

--boundary123--
"""

# Plain text part plus a quoted-printable text attachment
ATTACHMENT_EML = b"""From: Rares <rares@example.com>
Date: Thu, 2 May 2019 11:25:35 +0300
Subject: Re: kern/54143 (virtualbox)
To: bugs@example.com
Content-Type: multipart/mixed; boundary="0000000000007e2bb40587e36196"

--0000000000007e2bb40587e36196
Content-Type: text/plain; charset="UTF-8"

plain text part
--0000000000007e2bb40587e36196
Content-Disposition: attachment;
    filename=test.txt
Content-Type: text/plain; charset="UTF-8"
Content-Transfer-Encoding: quoted-printable

attachment text part
--0000000000007e2bb40587e36196--
"""

# Email with multiple attachments
MULTIPLE_ATTACHMENTS_EML = b"""From: sender@example.com
To: recipient@example.com
Subject: Multiple files
Date: Wed, 12 Feb 2026 18:00:00 +0100
Message-ID: <multi-attach@example.com>
MIME-Version: 1.0
Content-Type: multipart/mixed; boundary="boundary-multi"

--boundary-multi
Content-Type: text/plain; charset="utf-8"

Here are the files you requested.

--boundary-multi
Content-Type: application/pdf; name="report.pdf"
Content-Disposition: attachment; filename="report.pdf"
Content-Transfer-Encoding: base64

JVBERi0xLjQKJeLjz9MK

--boundary-multi
Content-Type: image/png; name="chart.png"
Content-Disposition: attachment; filename="chart.png"
Content-Transfer-Encoding: base64

iVBORw0KGgo=

--boundary-multi
Content-Type: text/csv; name="data.csv"
Content-Disposition: attachment; filename="data.csv"
Content-Transfer-Encoding: base64

TmFtZSxBZ2UK

--boundary-multi--
"""

# Empty text/plain and base64 text/html inside multipart/alternative
EMPTY_PLAINTEXT_BASE64_HTML_EML = b"""Return-Path: <support@example.org>
Received: from smtp.example.org (10.162.206.25) by
 mail.example.org (10.162.224.82) with Microsoft SMTP Server id
 15.1.1979.3 via Frontend Transport; Sun, 7 Feb 2021 23:49:48 -0500
MIME-Version: 1.0
From: Example IT - Support <support@example.org>
To: Servicedesk <servicedesk@example.net>
Date: Sun, 7 Feb 2021 23:49:48 -0500
Subject: Some very important email
Content-Type: multipart/alternative;
\tboundary="--boundary_83159_42d3ef90-0a52-4a0c-9867-0ccf54ca8b80"
Message-ID: <dshfkhhskjfdd0002eeaa@mail.example.org>

----boundary_83159_42d3ef90-0a52-4a0c-9867-0ccf54ca8b80
Content-Type: text/plain; charset="us-ascii"
Content-Transfer-Encoding: quoted-printable


----boundary_83159_42d3ef90-0a52-4a0c-9867-0ccf54ca8b80
Content-Type: text/html; charset="utf-8"
Content-Transfer-Encoding: base64

PHNwYW4+Zm9vIGJhcjwvc3Bhbj4=
----boundary_83159_42d3ef90-0a52-4a0c-9867-0ccf54ca8b80--
"""

# Part with a disposition missing its parameter separator
MALFORMED_DISPOSITION_EML = b"""From: sender@example.com
To: recipient@example.com
Subject: Broken disposition
Date: Wed, 12 Feb 2026 10:30:00 +0100
Content-Type: multipart/mixed; boundary="b1"

--b1
Content-Type: text/plain; charset="utf-8"
Content-Disposition: inline; xxx

Body survives
--b1
Content-Type: image/gif
Content-Disposition: inline; xxx
Content-Transfer-Encoding: base64
Content-ID: <pixel@example.com>

R0lGODlh
--b1
Content-Type: application/pdf
Content-Disposition: attachment; filename="kept.pdf"
Content-Transfer-Encoding: base64

JVBERi0xLjQKJeLjz9MK
--b1--
"""

# mixed -> alternative -> mixed, with the attachment in the innermost container
NESTED_THREE_LEVELS_EML = b"""From: sender@example.com
To: recipient@example.com
Subject: Nested
Date: Wed, 12 Feb 2026 10:30:00 +0100
Content-Type: multipart/mixed; boundary="outer"

--outer
Content-Type: multipart/alternative; boundary="middle"

--middle
Content-Type: text/plain; charset="utf-8"

Plain version
--middle
Content-Type: text/html; charset="utf-8"

<p>HTML version</p>
--middle
Content-Type: multipart/mixed; boundary="inner"

--inner
Content-Type: application/octet-stream
Content-Disposition: attachment; filename="inner.bin"
Content-Transfer-Encoding: base64

AAECAw==
--inner--
--middle--
--outer--
"""

# HTML body referencing an inline image by cid
RELATED_EMBEDDED_EML = b"""From: sender@example.com
To: recipient@example.com
Subject: Logo
Date: Wed, 12 Feb 2026 10:30:00 +0100
Content-Type: multipart/related; boundary="rel"

--rel
Content-Type: text/html; charset="utf-8"

<img src="cid:logo@example.com">
--rel
Content-Type: image/png
Content-Transfer-Encoding: base64
Content-ID: <logo@example.com>

iVBORw0KGgo=
--rel
Content-Type: image/png; name="banner.png"
Content-Disposition: inline; filename="banner.png"
Content-Transfer-Encoding: base64

iVBORw0KGgo=
--rel--
"""

# multipart/signed is read like multipart/mixed
SIGNED_EML = b"""From: signer@example.com
To: recipient@example.com
Subject: Signed
Date: Wed, 12 Feb 2026 10:30:00 +0100
Content-Type: multipart/signed; protocol="application/pgp-signature"; micalg=pgp-sha256;
 boundary="sig"

--sig
Content-Type: text/plain; charset="utf-8"

Signed text
--sig
Content-Type: application/pgp-signature; name="signature.asc"
Content-Disposition: attachment; filename="signature.asc"

-----BEGIN PGP SIGNATURE-----
-----END PGP SIGNATURE-----
--sig--
"""

# Forwarded message kept as raw bytes
FORWARDED_RFC822_EML = b"""From: forwarder@example.com
To: recipient@example.com
Subject: Fwd: Important message
Date: Wed, 12 Feb 2026 21:00:00 +0100
Content-Type: multipart/mixed; boundary="fwd"

--fwd
Content-Type: text/plain; charset="utf-8"

See below.
--fwd
Content-Type: message/rfc822
Content-Disposition: attachment
Content-Id: <original@example.com>

From: original@example.com
Subject: Important message

Original body
--fwd--
"""

# Encoded words in Subject and address display names
ENCODED_HEADERS_EML = b"""From: =?utf-8?q?J=C3=B6rg?= <joerg@example.com>
To: a@x.com,=?iso-8859-1?q?Fran=E7ois?= <b@x.com>
Subject: Re: =?utf-8?q?Caf=C3=A9?= =?utf-8?q?_au_lait?= menu
X-Custom: =?utf-8?q?Gr=C3=BC=C3=9Fe?=
Date: Wed, 12 Feb 2026 10:30:00 +0100
Content-Type: text/plain

hello
"""

# Encoded word with a charset Python has no codec for
UNSUPPORTED_CHARSET_ADDRESS_EML = b"""From: sender@example.com
To: a@x.com,=?x-unknown?q?Nobody?= <b@x.com>
Subject: =?x-unknown?q?hidden?= visible
Date: Wed, 12 Feb 2026 10:30:00 +0100
Content-Type: text/plain

hello
"""

# Email with ISO-8859-1 (Latin-1) encoding
LATIN1_ENCODING_EML = b"""From: latin@example.com
To: recipient@example.com
Subject: Latin encoding test
Date: Thu, 13 Feb 2026 10:00:00 +0100
Message-ID: <latin1-test@example.com>
Content-Type: text/plain; charset="iso-8859-1"

Caf\xe9 na\xefve r\xe9sum\xe9.
"""

# Email with only HTML (no plain text)
HTML_ONLY_EML = b"""From: htmlsender@example.com
To: htmlrecipient@example.com
Subject: HTML Newsletter
Date: Thu, 13 Feb 2026 09:00:00 +0100
Message-ID: <html-only@example.com>
MIME-Version: 1.0
Content-Type: text/html; charset="utf-8"

<h1>Welcome!</h1>
"""

# Non-text, non-multipart body
OCTET_STREAM_EML = b"""From: sender@example.com
To: recipient@example.com
Subject: Raw payload
Date: Thu, 13 Feb 2026 09:00:00 +0100
Content-Type: application/octet-stream
Content-Transfer-Encoding: base64

AAECAw==
"""

# Email without any Content-Type header
NO_CONTENT_TYPE_EML = b"""From: sender@example.com
To: recipient@example.com
Subject: Defaults
Date: Thu, 13 Feb 2026 09:00:00 +0100

Body without content type
"""

# Email with CC and BCC headers
CC_BCC_EMAIL_EML = b"""From: sender@example.com
To: to1@example.com, to2@example.com
Cc: cc1@example.com, Carol <cc2@example.com>
Bcc: hidden@example.com
Reply-To: replies@example.com
Sender: Mailer <mailer@example.com>
Subject: Multiple recipients
Date: Thu, 13 Feb 2026 11:00:00 +0100
Message-ID: <cc-test@example.com>
Content-Type: text/plain; charset="utf-8"

This email has multiple recipients in To and CC fields.
"""

# Email with References header (threading)
THREADED_EMAIL_EML = b"""From: participant@example.com
To: thread@example.com
Subject: Re: Re: Original topic
Date: Thu, 13 Feb 2026 12:00:00 +0100
Message-ID: <thread-3@example.com>
In-Reply-To: <thread-2@example.com>
References: <thread-1@example.com> <thread-2@example.com>
Content-Type: text/plain; charset="utf-8"

This is part of a longer email thread.
"""

# Resent-* block
RESENT_EML = b"""From: original@example.com
To: first@example.com
Subject: Resent message
Date: Thu, 13 Feb 2026 12:00:00 +0100
Resent-From: Relay <relay@example.com>
Resent-Sender: relay-bot@example.com
Resent-To: second@example.com
Resent-Cc: third@example.com
Resent-Date: Fri, 14 Feb 2026 08:00:00 +0000 (UTC)
Resent-Message-ID: <resent-1@example.com>
Content-Type: text/plain

Forwarded again
"""

# Child type that multipart/mixed cannot route
UNKNOWN_NESTED_TYPE_EML = b"""From: sender@example.com
To: recipient@example.com
Subject: Unknown part
Date: Thu, 13 Feb 2026 12:00:00 +0100
Content-Type: multipart/mixed; boundary="u"

--u
Content-Type: text/plain

ok
--u
Content-Type: application/x-mystery

???
--u--
"""

# Unknown transfer encoding on a text leaf
UNKNOWN_TRANSFER_ENCODING_EML = b"""From: sender@example.com
To: recipient@example.com
Subject: Bad encoding
Date: Thu, 13 Feb 2026 12:00:00 +0100
Content-Type: text/plain
Content-Transfer-Encoding: x-uuencode

begin 644 file
"""

# Malformed top-level Content-Type
MALFORMED_CONTENT_TYPE_EML = b"""From: sender@example.com
To: recipient@example.com
Subject: Bad content type
Date: Thu, 13 Feb 2026 12:00:00 +0100
Content-Type: text/; charset=utf-8

body
"""

# Date matching none of the accepted layouts
BAD_DATE_EML = b"""From: sender@example.com
To: recipient@example.com
Subject: Bad date
Date: yesterday at noon
Message-ID: <bad-date@example.com>
Content-Type: text/plain

body
"""

# Malformed address header and an undecodable body
BAD_ADDRESS_AND_BODY_EML = b"""From: not an address
To: recipient@example.com
Subject: Two problems
Date: Thu, 13 Feb 2026 12:00:00 +0100
Content-Type: text/plain
Content-Transfer-Encoding: x-unknown

body
"""

# Dictionary mapping names to sample emails
SAMPLE_EMAILS = {
    "simple_plain_text": SIMPLE_PLAIN_TEXT_EML,
    "multipart_html": MULTIPART_HTML_EML,
    "attachment": ATTACHMENT_EML,
    "multiple_attachments": MULTIPLE_ATTACHMENTS_EML,
    "empty_plaintext_base64_html": EMPTY_PLAINTEXT_BASE64_HTML_EML,
    "malformed_disposition": MALFORMED_DISPOSITION_EML,
    "nested_three_levels": NESTED_THREE_LEVELS_EML,
    "related_embedded": RELATED_EMBEDDED_EML,
    "signed": SIGNED_EML,
    "forwarded_rfc822": FORWARDED_RFC822_EML,
    "encoded_headers": ENCODED_HEADERS_EML,
    "unsupported_charset_address": UNSUPPORTED_CHARSET_ADDRESS_EML,
    "latin1_encoding": LATIN1_ENCODING_EML,
    "html_only": HTML_ONLY_EML,
    "octet_stream": OCTET_STREAM_EML,
    "no_content_type": NO_CONTENT_TYPE_EML,
    "cc_bcc": CC_BCC_EMAIL_EML,
    "threaded": THREADED_EMAIL_EML,
    "resent": RESENT_EML,
    "unknown_nested_type": UNKNOWN_NESTED_TYPE_EML,
    "unknown_transfer_encoding": UNKNOWN_TRANSFER_ENCODING_EML,
    "malformed_content_type": MALFORMED_CONTENT_TYPE_EML,
    "bad_date": BAD_DATE_EML,
    "bad_address_and_body": BAD_ADDRESS_AND_BODY_EML,
}
