"""Tests for rendering accessor classes."""

from resxgen.render_resource_class import NOT_NULL_ATTRIBUTE, render_resource_class
from resxgen.render_summary_comment import render_summary_comment
from resxgen.resx_entry import ResxEntry

FILE_REF_TYPE = "System.Resources.ResXFileRef, System.Windows.Forms"


def render(entries: list[ResxEntry], **kwargs: bool) -> str:
    """Render entries into a class named Strings."""
    return render_resource_class("App", "Strings", "App.Strings", entries, **kwargs)


def test_summary_comment() -> None:
    """Verify the doc comment paragraphs and XML escaping."""
    entry = ResxEntry(name="Greeting", value="Hi <b>{0}</b> & bye", comment="Shown")
    comment = render_summary_comment(entry)
    assert comment.splitlines() == [
        "<summary>",
        '        ///   <para>Looks up a localized string for "Greeting".</para>',
        "        ///   <para>Shown</para>",
        '        ///   <para>Value: "Hi &lt;b&gt;{0}&lt;/b&gt; &amp; bye".</para>',
        "        /// </summary>",
    ]


def test_summary_comment_skips_blank_comment_and_file_value() -> None:
    """Verify that blank comments and file reference values are omitted."""
    entry = ResxEntry(
        name="Readme",
        value="readme.txt;System.String, mscorlib",
        comment="  ",
        type=FILE_REF_TYPE,
    )
    comment = render_summary_comment(entry)
    assert "Value:" not in comment
    assert comment.count("<para>") == 1


def test_text_accessor_without_placeholders() -> None:
    """Verify that plain strings get only a property."""
    code = render([ResxEntry(name="Title", value="Hello")])
    assert "public static string? @Title" in code
    assert '=> GetString("Title");' in code
    assert "FormatTitle" not in code


def test_format_accessors() -> None:
    """Verify that placeholders produce two Format methods with max+1 args."""
    code = render([ResxEntry(name="Items", value="Hello {0}, you have {2} items")])
    params = "object? arg0, object? arg1, object? arg2"
    assert (
        "public static string? FormatItems"
        f"(global::System.Globalization.CultureInfo? provider, {params})"
    ) in code
    assert f"public static string? FormatItems({params})" in code
    assert '=> GetString(provider, "Items", arg0, arg1, arg2);' in code
    assert '=> GetString("Items", arg0, arg1, arg2);' in code


def test_typed_accessor() -> None:
    """Verify that non-string entries are exposed with their embedded type."""
    entry = ResxEntry(
        name="Logo",
        value="logo.png;System.Drawing.Bitmap, System.Drawing",
        type=FILE_REF_TYPE,
    )
    code = render([entry])
    assert "public static global::System.Drawing.Bitmap? @Logo" in code
    assert '=> (global::System.Drawing.Bitmap?)GetObject("Logo");' in code


def test_accessors_sorted_catalog_in_merge_order() -> None:
    """Verify that accessors are sorted while the name catalog is not."""
    entries = [
        ResxEntry(name="b", value="2"),
        ResxEntry(name="B", value="3"),
        ResxEntry(name="a", value="1"),
    ]
    code = render(entries)
    accessor_order = [
        code.index("string? @B\n"),
        code.index("string? @a\n"),
        code.index("string? @b\n"),
    ]
    assert accessor_order == sorted(accessor_order)

    catalog = code[code.index("StringsNames") :]
    const_order = [
        catalog.index('@b = "b"'),
        catalog.index('@B = "B"'),
        catalog.index('@a = "a"'),
    ]
    assert const_order == sorted(const_order)


def test_unnamed_entries_are_skipped() -> None:
    """Verify that entries without a name produce no members."""
    code = render([ResxEntry(name=None, value="x"), ResxEntry(name="", value="y")])
    assert "@ " not in code
    assert "public const string" not in code


def test_sanitized_names() -> None:
    """Verify that identifiers are sanitized but literals keep the raw name."""
    code = render([ResxEntry(name="1st.Value", value="x")])
    assert "public static string? @_1st_Value" in code
    assert '=> GetString("1st.Value");' in code
    assert 'public const string @_1st_Value = "1st.Value";' in code


def test_colliding_names_are_emitted_twice() -> None:
    """Verify that sanitization collisions are left as they are."""
    code = render([ResxEntry(name="a.b", value="1"), ResxEntry(name="a-b", value="2")])
    expected_count = 2
    assert code.count("public static string? @a_b\n") == expected_count


def test_namespace_wrapping() -> None:
    """Verify that classes are nested in the namespace only when one is given."""
    with_ns = render([])
    assert "namespace App\n{" in with_ns
    assert with_ns.rstrip().endswith("}")

    without_ns = render_resource_class(None, "Strings", "Strings", [])
    assert "namespace" not in without_ns
    assert "    internal partial class StringsNames" in without_ns


def test_resource_manager_uses_resource_name() -> None:
    """Verify that the ResourceManager is created for the resource name."""
    code = render([])
    assert (
        'new global::System.Resources.ResourceManager("App.Strings", '
        "typeof(Strings).Assembly)"
    ) in code
    assert code.startswith("\n#nullable enable\n")


def test_instance_members() -> None:
    """Verify that instance mode drops static and adds a culture constructor."""
    code = render([ResxEntry(name="Title", value="x")], use_instance_members=True)
    assert "static" not in code
    assert "public Strings(global::System.Globalization.CultureInfo? culture)" in code
    assert "public string? @Title" in code


def test_nullable_attributes() -> None:
    """Verify that NotNullIfNotNull is emitted only when supported."""
    assert NOT_NULL_ATTRIBUTE.strip() in render([])
    assert "NotNullIfNotNull" not in render([], supports_nullable_attributes=False)
