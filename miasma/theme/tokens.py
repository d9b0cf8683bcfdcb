"""
Syntax highlighting rules.

A rule's settings are one of two shapes: a foreground color with an optional
font style, or a font style alone. Rules are listed from general to specific;
the editor lets later rules win.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional, Union

from .palette import SYNTAX, TERMINAL, UI

FontStyle = Literal["bold", "italic", "underline", "strikethrough"]
FONT_STYLES: frozenset[str] = frozenset({"bold", "italic", "underline", "strikethrough"})


@dataclass(frozen=True)
class ColorSetting:
    foreground: str
    font_style: Optional[FontStyle] = None

    def __post_init__(self) -> None:
        if self.font_style is not None and self.font_style not in FONT_STYLES:
            raise ValueError(f"Unknown font style {self.font_style!r}")


@dataclass(frozen=True)
class StyleOnlySetting:
    font_style: FontStyle

    def __post_init__(self) -> None:
        if self.font_style not in FONT_STYLES:
            raise ValueError(f"Unknown font style {self.font_style!r}")


TokenSetting = Union[ColorSetting, StyleOnlySetting]


@dataclass(frozen=True)
class TokenColor:
    scope: Union[str, tuple[str, ...]]
    settings: TokenSetting
    name: Optional[str] = None


def _fg(color) -> ColorSetting:
    return ColorSetting(foreground=color.to_hex())


def token_colors() -> list[TokenColor]:
    tokens = {name: _fg(color) for name, color in SYNTAX.items()}

    def styled(font_style: FontStyle, color) -> ColorSetting:
        return ColorSetting(foreground=color.to_hex(), font_style=font_style)

    return [
        TokenColor(
            scope=(
                "meta.embedded",
                "source.groovy.embedded",
                "string meta.image.inline.markdown",
            ),
            settings=tokens["default"],
        ),
        TokenColor(scope="emphasis", settings=StyleOnlySetting("italic")),
        TokenColor(scope="strong", settings=StyleOnlySetting("bold")),
        TokenColor(scope="header", settings=tokens["uno1"]),
        TokenColor(scope=("comment", "punctuation.definition.comment"), settings=tokens["alt0"]),
        TokenColor(scope="constant.language", settings=tokens["tre2"]),
        TokenColor(scope="constant.regexp", settings=tokens["tre1"]),
        TokenColor(
            name="JSX tags",
            scope=("support.class.component", "entity.name.tag"),
            settings=tokens["uno0"],
        ),
        TokenColor(scope="entity.name.tag.css", settings=tokens["default"]),
        TokenColor(scope="entity.other.attribute-name", settings=tokens["due1"]),
        TokenColor(
            scope=(
                "entity.other.attribute-name.class.css",
                "entity.other.attribute-name.class.mixin.css",
                "entity.other.attribute-name.id.css",
                "entity.other.attribute-name.parent-selector.css",
                "source.css.less entity.other.attribute-name.id",
                "entity.other.attribute-name.scss",
            ),
            settings=tokens["due1"],
        ),
        TokenColor(
            scope=(
                "entity.other.attribute-name.pseudo-class.css",
                "entity.other.attribute-name.pseudo-element.css",
            ),
            settings=tokens["due2"],
        ),
        TokenColor(scope="invalid", settings=_fg(UI["error"])),
        TokenColor(scope="markup.underline", settings=StyleOnlySetting("underline")),
        TokenColor(scope="markup.bold", settings=styled("bold", SYNTAX["due1"])),
        TokenColor(scope="markup.heading", settings=styled("bold", SYNTAX["uno1"])),
        TokenColor(scope="markup.italic", settings=styled("italic", SYNTAX["due1"])),
        TokenColor(scope="markup.strikethrough", settings=StyleOnlySetting("strikethrough")),
        TokenColor(scope="markup.inserted", settings=_fg(TERMINAL["blue"])),
        TokenColor(scope="markup.deleted", settings=_fg(TERMINAL["red"])),
        TokenColor(scope="markup.changed", settings=_fg(TERMINAL["yellow"])),
        TokenColor(scope="punctuation.definition.quote.begin.markdown", settings=tokens["alt1"]),
        TokenColor(scope="punctuation.definition.list.begin.markdown", settings=tokens["alt1"]),
        TokenColor(scope="markup.inline.raw", settings=tokens["due1"]),
        TokenColor(
            name="brackets of XML/HTML tags",
            scope="punctuation.definition.tag",
            settings=tokens["alt1"],
        ),
        TokenColor(
            scope=("meta.preprocessor", "entity.name.function.preprocessor"),
            settings=tokens["due1"],
        ),
        TokenColor(scope="meta.preprocessor.string", settings=tokens["tre1"]),
        TokenColor(scope=("constant.numeric", "meta.preprocessor.numeric"), settings=tokens["tre0"]),
        TokenColor(scope="meta.structure.dictionary.key.python", settings=tokens["uno1"]),
        TokenColor(scope="source.diff", settings=tokens["alt1"]),
        TokenColor(scope="meta.diff.header", settings=_fg(TERMINAL["white"])),
        TokenColor(scope="storage", settings=tokens["default"]),
        TokenColor(scope=("source.java storage.type", "source.go storage.type"), settings=tokens["due1"]),
        TokenColor(scope="storage.type", settings=tokens["uno1"]),
        TokenColor(scope=("storage.modifier", "keyword.operator.noexcept"), settings=tokens["uno1"]),
        TokenColor(
            scope=("string", "meta.embedded.assembly", "constant.other.symbol"),
            settings=tokens["tre1"],
        ),
        TokenColor(scope="string.tag", settings=tokens["tre1"]),
        TokenColor(scope="string.value", settings=tokens["tre1"]),
        TokenColor(scope="string.regexp", settings=tokens["tre1"]),
        TokenColor(
            name="String interpolation",
            scope=(
                "punctuation.definition.template-expression.begin",
                "punctuation.definition.template-expression.end",
                "punctuation.section.embedded",
            ),
            settings=tokens["alt1"],
        ),
        TokenColor(
            name="Reset string interpolation expression",
            scope=("meta.template.expression", "meta.interpolation"),
            settings=tokens["default"],
        ),
        TokenColor(
            scope=(
                "support.type.vendored.property-name",
                "support.type.property-name",
                "variable.css",
                "variable.scss",
                "variable.other.less",
                "source.coffee.embedded",
            ),
            settings=tokens["uno0"],
        ),
        TokenColor(scope="keyword", settings=tokens["uno1"]),
        TokenColor(scope="keyword.control", settings=tokens["uno1"]),
        TokenColor(scope=("keyword.operator.type.annotation",), settings=tokens["alt1"]),
        TokenColor(scope="keyword.operator", settings=tokens["uno1"]),
        TokenColor(
            scope=(
                "keyword.operator.new",
                "keyword.operator.expression",
                "keyword.operator.cast",
                "keyword.operator.sizeof",
                "keyword.operator.alignof",
                "keyword.operator.typeid",
                "keyword.operator.alignas",
                "keyword.operator.instanceof",
                "keyword.operator.logical.python",
                "keyword.operator.wordlike",
            ),
            settings=tokens["uno1"],
        ),
        TokenColor(scope="keyword.other.unit", settings=tokens["tre2"]),
        TokenColor(
            scope=(
                "punctuation.section.embedded.begin.php",
                "punctuation.section.embedded.end.php",
            ),
            settings=tokens["alt1"],
        ),
        TokenColor(
            name="coloring of the Java import and package identifiers",
            scope=(
                "storage.modifier.import.java",
                "variable.language.wildcard.java",
                "storage.modifier.package.java",
            ),
            settings=tokens["default"],
        ),
        TokenColor(name="self", scope="variable.language", settings=tokens["due2"]),
        TokenColor(
            name="Functions",
            scope=(
                "entity.name.function",
                "meta.function-call.generic",
                "support.function",
                "support.constant.handlebars",
                "source.powershell variable.other.member",
                # https://en.cppreference.com/w/cpp/language/user_literal
                "entity.name.operator.custom-literal",
            ),
            settings=tokens["due0"],
        ),
        TokenColor(
            name="Types declaration and references",
            scope=(
                "support.class",
                "support.type",
                "entity.name.type",
                "entity.name.namespace",
                "entity.other.attribute",
                "entity.name.scope-resolution",
                "entity.name.class",
            ),
            settings=tokens["due1"],
        ),
        TokenColor(
            name="Types declaration and references, TS grammar specific",
            scope=(
                "meta.type.cast.expr",
                "meta.type.new.expr",
                "support.constant.math",
                "support.constant.dom",
                "support.constant.json",
                "entity.other.inherited-class",
            ),
            settings=tokens["due1"],
        ),
        TokenColor(
            name="Control flow / Special keywords",
            scope=(
                "keyword.control",
                "source.cpp keyword.operator.new",
                "keyword.operator.delete",
                "keyword.other.using",
                "keyword.other.operator",
                "entity.name.operator",
            ),
            settings=tokens["uno1"],
        ),
        TokenColor(
            name="Variable and parameter name",
            scope=(
                "variable",
                "meta.definition.variable.name",
                "support.variable",
                "entity.name.variable",
            ),
            settings=tokens["default"],
        ),
        TokenColor(
            name="Object keys, TS grammar specific",
            scope=("meta.object-literal.key",),
            settings=tokens["uno0"],
        ),
        TokenColor(
            name="CSS property value",
            scope=(
                "support.constant.property-value",
                "support.constant.font-name",
                "support.constant.media-type",
                "support.constant.media",
                "constant.other.color.rgb-value",
                "constant.other.rgb-value",
                "support.constant.color",
            ),
            settings=tokens["due0"],
        ),
        TokenColor(
            name="String placeholders",
            scope=("constant.other.placeholder",),
            settings=tokens["uno1"],
        ),
        TokenColor(
            name="Regular expression groups",
            scope=(
                "punctuation.definition.group.regexp",
                "punctuation.definition.group.assertion.regexp",
                "punctuation.definition.character-class.regexp",
                "punctuation.character.set.begin.regexp",
                "punctuation.character.set.end.regexp",
                "keyword.operator.negation.regexp",
                "support.other.parenthesis.regexp",
            ),
            settings=tokens["tre0"],
        ),
        TokenColor(
            scope=(
                "constant.character.character-class.regexp",
                "constant.other.character-class.set.regexp",
                "constant.other.character-class.regexp",
                "constant.character.set.regexp",
            ),
            settings=tokens["tre0"],
        ),
        TokenColor(scope=("keyword.operator.or.regexp", "keyword.control.anchor.regexp"), settings=tokens["alt1"]),
        TokenColor(scope="keyword.operator.quantifier.regexp", settings=tokens["tre0"]),
        TokenColor(scope=("constant.character", "constant.other.option"), settings=tokens["tre0"]),
        TokenColor(scope="constant.character.escape", settings=tokens["tre0"]),
        TokenColor(scope="entity.name.label", settings=tokens["default"]),
        TokenColor(scope=("punctuation", "meta.brace"), settings=tokens["alt1"]),
    ]
