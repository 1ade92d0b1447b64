"""Logic for rendering the C# accessor class and its name catalog."""

from string import Template

from resxgen.render_summary_comment import render_summary_comment
from resxgen.resx_entry import ResxEntry, infer_arity
from resxgen.sanitizer import sanitize_identifier

NOT_NULL_ATTRIBUTE = (
    "[return: global::System.Diagnostics.CodeAnalysis"
    '.NotNullIfNotNullAttribute("defaultValue")]\n        '
)

INSTANCE_CONSTRUCTOR = Template("""
        public ${class_name}(global::System.Globalization.CultureInfo? culture)
        {
            Culture = culture;
        }""")

# ResourceManager plumbing shared by every generated class.
HELPER_MEMBERS = Template("""
        /// <summary>
        ///   Returns the cached ResourceManager instance used by this class.
        /// </summary>
        [global::System.ComponentModel.EditorBrowsableAttribute(global::System.ComponentModel.EditorBrowsableState.Advanced)]
        public ${static}global::System.Resources.ResourceManager ResourceManager
        {
            get
            {
                if (resourceMan is null)
                {
                    resourceMan = new global::System.Resources.ResourceManager("${resource_name}", typeof(${class_name}).Assembly);
                }

                return resourceMan;
            }
        }

        /// <summary>
        ///   Overrides the current thread's CurrentUICulture property for all
        ///   resource lookups using this strongly typed resource class.
        /// </summary>
        [System.ComponentModel.EditorBrowsableAttribute(System.ComponentModel.EditorBrowsableState.Advanced)]
        public ${static}global::System.Globalization.CultureInfo? Culture { get; set; }

        ${not_null}public ${static}object? GetObject(global::System.Globalization.CultureInfo? culture, string name, object? defaultValue)
        {
            culture ??= Culture;
            object? obj = ResourceManager.GetObject(name, culture);
            if (obj == null)
            {
                return defaultValue;
            }

            return obj;
        }

        public ${static}object? GetObject(global::System.Globalization.CultureInfo? culture, string name)
            => GetObject(culture: culture, name: name, defaultValue: null);

        public ${static}object? GetObject(string name)
            => GetObject(culture: null, name: name, defaultValue: null);

        ${not_null}public ${static}object? GetObject(string name, object? defaultValue)
            => GetObject(culture: null, name: name, defaultValue: defaultValue);

        public ${static}global::System.IO.Stream? GetStream(string name)
            => GetStream(culture: null, name: name);

        public ${static}global::System.IO.Stream? GetStream(global::System.Globalization.CultureInfo? culture, string name)
            => ResourceManager.GetStream(name, culture ?? Culture);

        public ${static}string? GetString(global::System.Globalization.CultureInfo? culture, string name)
            => GetString(culture: culture, name: name, args: null);

        public ${static}string? GetString(global::System.Globalization.CultureInfo? culture, string name, params object?[]? args)
        {
            culture ??= Culture;
            string? str = ResourceManager.GetString(name, culture);
            if (str == null)
            {
                return null;
            }

            if (args != null)
            {
                return string.Format(culture, str, args);
            }
            else
            {
                return str;
            }
        }

        public ${static}string? GetString(string name, params object?[]? args)
            => GetString(culture: null, name: name, args: args);

        ${not_null}public ${static}string? GetString(string name, string? defaultValue)
            => GetStringWithDefault(culture: null, name: name, defaultValue: defaultValue, args: null);

        public ${static}string? GetString(string name)
            => GetStringWithDefault(culture: null, name: name, defaultValue: null, args: null);

        ${not_null}public ${static}string? GetStringWithDefault(global::System.Globalization.CultureInfo? culture, string name, string? defaultValue)
            => GetStringWithDefault(culture: culture, name: name, defaultValue: defaultValue, args: null);

        ${not_null}public ${static}string? GetStringWithDefault(global::System.Globalization.CultureInfo? culture, string name, string? defaultValue, params object?[]? args)
        {
            culture ??= Culture;
            string? str = ResourceManager.GetString(name, culture);
            if (str == null)
            {
                if (defaultValue == null || args == null)
                {
                    return defaultValue;
                }
                else
                {
                    return string.Format(culture, defaultValue, args);
                }
            }

            if (args != null)
            {
                return string.Format(culture, str, args);
            }
            else
            {
                return str;
            }
        }

        ${not_null}public ${static}string? GetStringWithDefault(string name, string? defaultValue, params object?[]? args)
            => GetStringWithDefault(culture: null, name: name, defaultValue: defaultValue, args: args);

        ${not_null}public ${static}string? GetStringWithDefault(string name, string? defaultValue)
            => GetStringWithDefault(culture: null, name: name, defaultValue: defaultValue, args: null);
""")


def _render_text_entry(entry: ResxEntry, static: str) -> list[str]:
    """Render the string accessor and, for format strings, the Format methods."""
    name = entry.name
    ident = sanitize_identifier(name or "")
    comment = render_summary_comment(entry)
    parts = [
        f"        /// {comment}",
        f"        public {static}string? @{ident}",
        f'            => GetString("{name}");',
        "",
    ]

    arity = infer_arity(entry.value)
    if arity is None:
        return parts

    in_params = ", ".join(f"object? arg{i}" for i in range(arity + 1))
    call_params = ", ".join(f"arg{i}" for i in range(arity + 1))
    parts += [
        f"        /// {comment}",
        f"        public {static}string? Format{ident}"
        f"(global::System.Globalization.CultureInfo? provider, {in_params})",
        f'            => GetString(provider, "{name}", {call_params});',
        "",
        f"        /// {comment}",
        f"        public {static}string? Format{ident}({in_params})",
        f'            => GetString("{name}", {call_params});',
        "",
    ]
    return parts


def _render_object_entry(entry: ResxEntry, static: str) -> list[str]:
    """Render a typed accessor for a non-string entry."""
    type_name = f"global::{entry.full_type_name or ''}"
    return [
        f"        public {static}{type_name}? @{sanitize_identifier(entry.name or '')}",
        f'            => ({type_name}?)GetObject("{entry.name}");',
        "",
    ]


def render_resource_class(
    namespace: str | None,
    class_name: str,
    resource_name: str,
    entries: list[ResxEntry],
    *,
    supports_nullable_attributes: bool = True,
    use_instance_members: bool = False,
) -> str:
    """Render the accessor class and the ``<ClassName>Names`` catalog.

    Accessors are sorted by name; the catalog keeps merge order.
    """
    static = "" if use_instance_members else "static "
    not_null = NOT_NULL_ATTRIBUTE if supports_nullable_attributes else ""

    parts: list[str] = ["", "#nullable enable"]
    if namespace is not None:
        parts += [f"namespace {namespace}", "{"]

    parts += [
        f"    internal partial class {class_name}",
        "    {",
        f"        private {static}global::System.Resources.ResourceManager? resourceMan;",
        "",
        f"        public {class_name}() {{ }}",
    ]
    if use_instance_members:
        parts.append(INSTANCE_CONSTRUCTOR.substitute(class_name=class_name))
    parts.append(
        HELPER_MEMBERS.substitute(
            static=static,
            class_name=class_name,
            resource_name=resource_name,
            not_null=not_null,
        )
    )

    for entry in sorted(entries, key=lambda e: e.name or ""):
        if not entry.name:
            continue
        if entry.is_text:
            parts += _render_text_entry(entry, static)
        else:
            parts += _render_object_entry(entry, static)
    parts += ["    }", ""]

    parts += [f"    internal partial class {class_name}Names", "    {"]
    for entry in entries:
        if not entry.name:
            continue
        parts.append(
            f"        public const string @{sanitize_identifier(entry.name)}"
            f' = "{entry.name}";'
        )
    parts.append("    }")

    if namespace is not None:
        parts.append("}")
    return "\n".join(parts) + "\n"
