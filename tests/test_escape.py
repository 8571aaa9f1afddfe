from xunit_report.utils.escape import escape, to_text

def test_plain_text_is_unchanged():
    assert escape("adds numbers") == "adds numbers"

def test_special_characters():
    assert escape('a & b < c > d "e"') == "a &amp; b &lt; c &gt; d &quot;e&quot;"

def test_ampersand_is_escaped_first():
    assert escape("&lt;") == "&amp;lt;"

def test_cdata_terminator_is_neutralised():
    assert "]]>" not in escape("boom ]]> here")

def test_absent_text_is_empty():
    assert escape(None) == ""
    assert escape("") == ""

def test_invalid_bytes_become_replacement_character():
    assert escape(b"ok \xff") == "ok \ufffd"

def test_non_strings_are_stringified():
    assert escape(0.005) == "0.005"
    assert escape(3) == "3"

def test_broken_str_does_not_raise():
    class Broken:
        def __str__(self): raise RuntimeError("nope")
    assert "Broken" in to_text(Broken())

def test_package_exports_are_lazy():
    import xunit_report
    from xunit_report.reporters.xunit import XUnitReporter
    assert xunit_report.escape is escape
    assert xunit_report.XUnitReporter is XUnitReporter

def test_lone_surrogate_becomes_replacement_character():
    assert escape("reads \udcff <x>") == "reads \ufffd &lt;x&gt;"
    escape("\ud800").encode("utf-8")
