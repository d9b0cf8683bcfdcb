"""
Editor UI color roles.

https://code.visualstudio.com/api/references/theme-color

Each editor area is a function returning its role -> color mapping. Values are
final hex strings, or None for roles deliberately left to the editor default
(dropped at serialization). ``SECTIONS`` lists the areas in composition
order; when two areas assign the same role the later one wins.
"""

from __future__ import annotations

from typing import Callable, Mapping, Optional

from miasma.color import Color, alpha

from .palette import BG, DIFF, SYNTAX, TERMINAL, TRANSPARENT, UI

ThemeUIColors = dict[str, Optional[str]]


def _hex(palette: Mapping[str, Color]) -> dict[str, str]:
    return {name: color.to_hex() for name, color in palette.items()}


ui = _hex(UI)
syntax = _hex(SYNTAX)
terminal = _hex(TERMINAL)
diff = _hex(DIFF)
bg = _hex(BG)


# =============================================================================
# Sections
# =============================================================================


def theme_base() -> ThemeUIColors:
    return {
        "focusBorder": ui["accent0"],
        "errorForeground": terminal["red"],
        "disabledForeground": alpha(ui["fg"], 50),
        "foreground": ui["fg"],
        "icon.foreground": ui["fg"],
        "toolbar.hoverBackground": alpha(ui["border1"], 30),
        "toolbar.activeBackground": alpha(ui["border1"], 50),
        "widget.border": ui["border0"],
        "widget.shadow": ui["bg0"],
        "input.border": ui["border1"],
        "input.background": ui["bg0"],
        "input.placeholderForeground": alpha(ui["fg"], 40),
        "progressBar.background": ui["fg"],
        "inputOption.activeBorder": ui["fg"],
        "pickerGroup.border": alpha(ui["border0"], 50),
        "debugToolBar.background": ui["bg0"],
        "tree.indentGuidesStroke": alpha(ui["fg"], 10),
    }


def theme_scrollbar() -> ThemeUIColors:
    return {
        "scrollbar.shadow": TRANSPARENT,
        "scrollbarSlider.background": alpha(ui["border1"], 40),
        "scrollbarSlider.hoverBackground": alpha(ui["border1"], 50),
        "scrollbarSlider.activeBackground": alpha(ui["border1"], 60),
    }


def theme_command_center() -> ThemeUIColors:
    return {
        "commandCenter.foreground": ui["fg"],
        "commandCenter.inactiveForeground": alpha(ui["fg"], 50),
        "commandCenter.background": ui["bg1"],
        "commandCenter.border": ui["border0"],
        "commandCenter.inactiveBorder": ui["border0"],
        "commandCenter.activeBackground": alpha(ui["border1"], 10),
        "commandCenter.activeBorder": ui["border0"],
    }


def theme_list() -> ThemeUIColors:
    return {
        "quickInput.background": ui["bg1"],
        "list.errorForeground": terminal["red"],
        "list.warningForeground": terminal["yellow"],
        "list.highlightForeground": ui["accent0"],
        "list.focusForeground": ui["fg"],
        "list.focusHighlightForeground": ui["bg0"],
        "list.activeSelectionIconForeground": ui["bg0"],
        "list.activeSelectionForeground": ui["bg0"],
        "list.activeSelectionBackground": ui["fg"],
        "list.inactiveSelectionIconForeground": ui["fg"],
        "list.inactiveSelectionForeground": ui["fg"],
        "list.inactiveSelectionBackground": ui["bg0"],
        "quickInputList.focusIconForeground": ui["bg0"],
        "quickInputList.focusForeground": ui["bg0"],
        "quickInputList.focusBackground": ui["fg"],
        "list.hoverBackground": alpha(ui["border1"], 25),
    }


def theme_status_bar() -> ThemeUIColors:
    return {
        "statusBar.border": ui["border0"],
        "statusBarItem.activeBackground": alpha(ui["border1"], 40),
        "statusBarItem.hoverBackground": alpha(ui["border1"], 20),
        "statusBarItem.remoteForeground": ui["fg"],
        "statusBarItem.remoteBackground": ui["bg1"],
        "statusBarItem.remoteHoverForeground": ui["fg"],
        "statusBarItem.remoteHoverBackground": alpha(ui["border1"], 20),
        "statusBar.background": ui["bg1"],
        "statusBar.debuggingBackground": ui["bg1"],
        "statusBar.noFolderBackground": ui["bg1"],
        "statusBar.foreground": ui["fg"],
    }


def theme_badge() -> ThemeUIColors:
    return {
        "badge.foreground": ui["bg0"],
        "badge.background": ui["accent1"],
    }


def theme_menu() -> ThemeUIColors:
    return {
        "menu.background": ui["bg1"],
        "menu.foreground": ui["fg"],
        "menu.separatorBackground": ui["border0"],
        "menu.border": ui["border0"],
    }


def theme_keybinding() -> ThemeUIColors:
    return {
        "keybindingLabel.background": TRANSPARENT,
        "keybindingLabel.foreground": ui["fg"],
        "keybindingLabel.border": ui["border0"],
        "keybindingLabel.bottomBorder": ui["border0"],
    }


def theme_activity_bar() -> ThemeUIColors:
    return {
        "activityBar.border": ui["border0"],
        "activityBar.background": ui["bg1"],
        "activityBar.foreground": ui["accent0"],
        "activityBar.inactiveForeground": ui["fg"],
        "activityBarBadge.background": ui["accent1"],
        "activityBarBadge.foreground": ui["bg0"],
        "activityBar.activeBorder": ui["accent0"],
        "activityBar.activeBackground": TRANSPARENT,
        "activityBarTop.activeBorder": ui["accent0"],
        "activityBarTop.dropBorder": ui["accent0"],
        "activityBarTop.foreground": ui["accent0"],
        "activityBarTop.inactiveForeground": ui["fg"],
    }


def theme_bracket_colors() -> ThemeUIColors:
    return {
        "editorBracketHighlight.foreground1": ui["bracket1"],
        "editorBracketHighlight.foreground2": ui["bracket2"],
        "editorBracketHighlight.foreground3": ui["bracket3"],
        "editorBracketHighlight.foreground4": ui["bracket1"],
        "editorBracketHighlight.foreground5": ui["bracket2"],
        "editorBracketHighlight.foreground6": ui["bracket3"],
        "editorBracketHighlight.unexpectedBracket.foreground": ui["error"],
    }


def theme_editor() -> ThemeUIColors:
    return {
        "editorWidget.foreground": ui["fg"],
        "editorWidget.background": ui["bg0"],
        "editorWidget.border": ui["border1"],
        "editorWidget.resizeBorder": ui["border1"],
        "editorBracketMatch.background": alpha(syntax["due2"], 15),
        "editorBracketMatch.border": alpha(syntax["due2"], 50),
        "editor.findMatchBackground": alpha(bg["orange"], 50),
        "editor.findMatchHighlightBackground": alpha(bg["orange"], 50),
        "editor.findRangeHighlightBackground": alpha(bg["yellow"], 50),
        "editor.foreground": ui["fg"],
        "editor.background": ui["bg0"],
        "editor.foldBackground": TRANSPARENT,
        "editorLink.activeForeground": terminal["blue"],
        "editor.lineHighlightBackground": ui["bg1"],
        "editor.rangeHighlightBackground": alpha(bg["yellow"], 50),
        "editor.selectionBackground": alpha(syntax["due2"], 30),
        "editor.inactiveSelectionBackground": alpha(syntax["due2"], 30),
        "editor.wordHighlightBackground": alpha(bg["blue"], 50),
        "editor.wordHighlightStrongBackground": alpha(bg["purple"], 50),
        "editorOverviewRuler.border": alpha(ui["border0"], 25),
        "editorCursor.foreground": ui["accent0"],
        "editorGroup.border": ui["border0"],
        "editorIndentGuide.background": alpha(ui["fg"], 10),
        "editorIndentGuide.activeBackground": alpha(ui["fg"], 50),
        "editorLineNumber.foreground": ui["border1"],
        "editorLineNumber.activeForeground": ui["fg"],
        "editorCodeLens.foreground": syntax["alt0"],
        "editorLightBulb.foreground": syntax["uno1"],
        "editorLightBulbAutoFix.foreground": syntax["due1"],
        "editorRuler.foreground": alpha(ui["border0"], 50),
        "editorSuggestWidget.background": ui["bg0"],
        "editorHoverWidget.background": ui["bg0"],
        "editorSuggestWidget.border": ui["border1"],
        "editorHoverWidget.border": ui["border1"],
        "editorGutter.background": None,
        "editorGutter.modifiedBackground": terminal["magenta"],
        "editorGutter.addedBackground": terminal["blue"],
        "editorGutter.deletedBackground": terminal["red"],
        "editorGutter.commentRangeForeground": None,
        "editorGutter.foldingControlForeground": None,
    }


def theme_peek_view() -> ThemeUIColors:
    return {
        "peekView.border": ui["border1"],
        "peekViewTitle.background": ui["bg0"],
        "peekViewTitleLabel.foreground": ui["fg"],
        "peekViewTitleDescription.foreground": syntax["alt1"],
        "peekViewEditor.background": ui["bg0"],
        "peekViewResult.background": ui["bg0"],
        "peekViewResult.fileForeground": ui["fg"],
        "peekViewResult.lineForeground": ui["fg"],
    }


def theme_notifications() -> ThemeUIColors:
    return {
        "notificationCenter.border": None,
        "notificationCenterHeader.foreground": ui["fg"],
        "notificationCenterHeader.background": ui["bg1"],
        "notificationToast.border": ui["border0"],
        "notifications.foreground": ui["fg"],
        "notifications.background": ui["bg1"],
        "notifications.border": None,
        "notificationLink.foreground": syntax["alt1"],
    }


def theme_drag_and_drop() -> ThemeUIColors:
    color = alpha(syntax["due2"], 30)
    return {
        "list.dropBackground": color,
        "sideBar.dropBackground": color,
        "editorGroup.dropBackground": color,
    }


def theme_button() -> ThemeUIColors:
    return {
        "button.border": ui["fg"],
        "button.background": ui["fg"],
        "button.foreground": ui["bg0"],
        "button.hoverBackground": alpha(ui["fg"], 95),
        "button.separator": alpha(ui["bg0"], 30),
        "button.secondaryBackground": ui["bg0"],
        "button.secondaryForeground": ui["fg"],
        "button.secondaryHoverBackground": alpha(ui["bg0"], 95),
    }


def theme_panel() -> ThemeUIColors:
    return {
        "panel.background": ui["bg0"],
        "panel.border": ui["border0"],
        "panelSection.border": ui["border0"],
        "panelSectionHeader.border": ui["border0"],
        "panelTitle.activeBorder": ui["accent0"],
        "panelTitle.activeForeground": ui["accent0"],
        "panelTitle.inactiveForeground": ui["fg"],
        "sideBar.border": ui["border0"],
        "sideBar.background": ui["bg1"],
        "sideBarSectionHeader.background": ui["bg1"],
        "sideBarSectionHeader.border": ui["border0"],
    }


def theme_tabs() -> ThemeUIColors:
    return {
        "tab.border": ui["border0"],
        "editorGroupHeader.tabsBorder": ui["border0"],
        "editorGroupHeader.border": ui["border0"],
        "breadcrumb.background": ui["bg0"],
        "editorGroupHeader.noTabsBackground": ui["bg0"],
        "editorGroupHeader.tabsBackground": ui["bg1"],
        "tab.activeBorder": ui["border0"],
        "tab.unfocusedActiveBorder": ui["border0"],
        "tab.activeBorderTop": ui["accent0"],
        "tab.unfocusedActiveBorderTop": ui["accent0"],
        "tab.activeBackground": ui["bg0"],
        "tab.activeForeground": ui["fg"],
        "tab.inactiveBackground": ui["bg1"],
        "tab.inactiveForeground": alpha(ui["fg"], 80),
    }


def theme_diff() -> ThemeUIColors:
    return {
        "diffEditor.insertedTextBackground": alpha(diff["blue"], 25),
        "diffEditor.removedTextBackground": alpha(diff["red"], 25),
        "diffEditor.border": ui["border0"],
        "diffEditor.diagonalFill": alpha(syntax["default"], 10),
        "diffEditor.insertedLineBackground": alpha(diff["blue"], 25),
        "diffEditor.removedLineBackground": alpha(diff["red"], 25),
        "diffEditorGutter.insertedLineBackground": alpha(diff["blue"], 25),
        "diffEditorGutter.removedLineBackground": alpha(diff["red"], 25),
        "diffEditorOverview.insertedForeground": terminal["blue"],
        "diffEditorOverview.removedForeground": terminal["red"],
    }


def theme_merge() -> ThemeUIColors:
    return {
        "merge.currentHeaderBackground": alpha(diff["blue"], 65),
        "merge.currentContentBackground": alpha(diff["blue"], 25),
        "merge.incomingHeaderBackground": alpha(diff["red"], 65),
        "merge.incomingContentBackground": alpha(diff["red"], 25),
        "merge.border": None,
        "merge.commonContentBackground": None,
        "merge.commonHeaderBackground": None,
    }


def theme_git() -> ThemeUIColors:
    return {
        "gitDecoration.modifiedResourceForeground": terminal["blue"],
        "gitDecoration.deletedResourceForeground": terminal["red"],
        "gitDecoration.untrackedResourceForeground": terminal["magenta"],
        "gitDecoration.conflictingResourceForeground": terminal["cyan"],
        "gitDecoration.ignoredResourceForeground": alpha(ui["fg"], 40),
    }


def theme_titlebar() -> ThemeUIColors:
    return {
        "titleBar.activeBackground": ui["bg1"],
        "titleBar.activeForeground": ui["fg"],
        "titleBar.inactiveBackground": ui["bg1"],
        "titleBar.inactiveForeground": alpha(ui["fg"], 70),
        "titleBar.border": ui["border0"],
    }


def theme_dropdown() -> ThemeUIColors:
    return {
        "dropdown.background": ui["bg0"],
        "dropdown.listBackground": ui["bg0"],
        "dropdown.border": ui["border1"],
        "dropdown.foreground": ui["fg"],
    }


def theme_highlight_borders() -> ThemeUIColors:
    return {
        "editor.selectionHighlightBorder": None,
        "editor.wordHighlightBorder": None,
        "editor.wordHighlightStrongBorder": None,
        "editor.findMatchBorder": None,
        "editor.findMatchHighlightBorder": None,
        "editor.findRangeHighlightBorder": None,
        "editor.rangeHighlightBorder": None,
    }


def theme_terminal() -> ThemeUIColors:
    return {
        "terminal.foreground": ui["fg"],
        "terminal.background": ui["bg0"],
        "terminal.ansiBlack": terminal["black"],
        "terminal.ansiBlue": terminal["blue"],
        "terminal.ansiBrightBlack": terminal["black"],
        "terminal.ansiBrightBlue": terminal["blue"],
        "terminal.ansiBrightCyan": terminal["cyan"],
        "terminal.ansiBrightGreen": terminal["green"],
        "terminal.ansiBrightMagenta": terminal["magenta"],
        "terminal.ansiBrightRed": terminal["red"],
        "terminal.ansiBrightWhite": terminal["white"],
        "terminal.ansiBrightYellow": terminal["yellow"],
        "terminal.ansiCyan": terminal["cyan"],
        "terminal.ansiGreen": terminal["green"],
        "terminal.ansiMagenta": terminal["magenta"],
        "terminal.ansiRed": terminal["red"],
        "terminal.ansiWhite": terminal["white"],
        "terminal.ansiYellow": terminal["yellow"],
    }


def theme_welcome() -> ThemeUIColors:
    return {
        "textLink.foreground": ui["link"],
        "textLink.activeForeground": ui["link"],
        "textBlockQuote.background": TRANSPARENT,
        "textBlockQuote.border": syntax["default"],
        "textPreformat.foreground": syntax["due1"],
    }


def theme_settings() -> ThemeUIColors:
    return {
        "settings.headerForeground": syntax["uno1"],
        "settings.rowHoverBackground": alpha(ui["bg1"], 25),
        "settings.modifiedItemIndicator": syntax["due1"],
        "settings.dropdownBackground": ui["bg1"],
        "settings.checkboxBackground": ui["bg1"],
        "settings.textInputBackground": ui["bg1"],
        "settings.numberInputBackground": ui["bg1"],
    }


# =============================================================================
# Composition
# =============================================================================

SECTIONS: list[tuple[str, Callable[[], ThemeUIColors]]] = [
    ("base", theme_base),
    ("scrollbar", theme_scrollbar),
    ("command_center", theme_command_center),
    ("list", theme_list),
    ("status_bar", theme_status_bar),
    ("badge", theme_badge),
    ("menu", theme_menu),
    ("keybinding", theme_keybinding),
    ("activity_bar", theme_activity_bar),
    ("bracket_colors", theme_bracket_colors),
    ("editor", theme_editor),
    ("peek_view", theme_peek_view),
    ("notifications", theme_notifications),
    ("drag_and_drop", theme_drag_and_drop),
    ("button", theme_button),
    ("panel", theme_panel),
    ("tabs", theme_tabs),
    ("diff", theme_diff),
    ("merge", theme_merge),
    ("git", theme_git),
    ("titlebar", theme_titlebar),
    ("dropdown", theme_dropdown),
    ("highlight_borders", theme_highlight_borders),
    ("terminal", theme_terminal),
    ("welcome", theme_welcome),
    ("settings", theme_settings),
]


def compose(
    sections: list[tuple[str, Callable[[], ThemeUIColors]]],
) -> ThemeUIColors:
    """Merge sections in order; later sections override earlier roles."""
    colors: ThemeUIColors = {}
    for _name, section in sections:
        colors.update(section())
    return colors


def colors() -> ThemeUIColors:
    """All UI roles of the theme, unsorted and including None values."""
    return compose(SECTIONS)
