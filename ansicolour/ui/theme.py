"""
Centralized UI theme constants for the preview page.
"""

HEADER_CLASSES = "w-full items-center justify-between px-4 py-2 bg-gradient-to-r from-[#0f172a] to-[#312e81]"
HEADER_TITLE_CLASSES = "text-lg font-bold text-white tracking-wide"
HEADER_PATH_CLASSES = "text-xs text-slate-300 font-mono truncate"

BODY_CLASSES = "w-full gap-2 p-2 flex-nowrap items-start"
EDITOR_COL_CLASSES = "w-1/3 flex-none gap-1"
PREVIEW_COL_CLASSES = "flex-grow min-w-0 gap-1"
SECTION_LABEL_CLASSES = "text-xs font-bold text-slate-500 uppercase tracking-wide"

EDITOR_PROPS = "outlined autogrow input-class=font-mono"
PREVIEW_CARD_CLASSES = "w-full p-0 overflow-auto shadow-sm"
