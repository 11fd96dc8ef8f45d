"""Sample PO content shared by tests"""

SAMPLE_PO = """\
# Turkish translations for the example project.
msgid ""
msgstr ""
"Project-Id-Version: example 1.0\\n"
"Language: tr\\n"
"MIME-Version: 1.0\\n"
"Content-Type: text/plain; charset=UTF-8\\n"
"Content-Transfer-Encoding: 8bit\\n"

#: app/views.py:10
msgid "Hello"
msgstr ""

#: app/views.py:12
msgid "Welcome {name}"
msgstr "Hoş geldin {name}"

#: app/templates/base.html:3
#, fuzzy, python-format
#| msgid "Old %(count)s items"
msgid "You have %(count)s items"
msgstr "%(count)s öğeniz var"

msgid ""
"Hello "
"World"
msgstr ""

msgctxt "menu"
msgid "Open"
msgstr "Aç"

#~| msgid "Removed old"
#~ msgid "Removed"
#~ msgstr "Kaldırıldı"
"""

# 1-based line of each msgid keyword in SAMPLE_PO
SAMPLE_PO_LINES = {
    "Hello": 11,
    "Welcome {name}": 15,
    "You have %(count)s items": 21,
    "Hello World": 24,
    "Open": 30,
}

CONTEXT_PO = """\
msgid ""
msgstr ""
"Content-Type: text/plain; charset=UTF-8\\n"

msgctxt "menu"
msgid "Open"
msgstr ""

msgctxt "dialog"
msgid "Open"
msgstr ""
"""

PLURAL_PO = """\
msgid ""
msgstr ""
"Content-Type: text/plain; charset=UTF-8\\n"
"Plural-Forms: nplurals=2; plural=(n != 1);\\n"

#, fuzzy
msgid "%(count)s file"
msgid_plural "%(count)s files"
msgstr[0] ""
msgstr[1] "%(count)s dosya"
"""

ASCII_PO = """\
msgid ""
msgstr ""
"Language: tr\\n"
"Content-Type: text/plain; charset=ASCII\\n"

msgid "Hello"
msgstr ""
"""
