from __future__ import annotations

"""
Tailwind class strings for the todo screen (light slate).

One padding source: the outer card defines padding; rows use gap only.
"""

STYLE_BG = "bg-slate-50 text-slate-900 min-h-screen"
STYLE_CONTAINER = "w-full max-w-xl mx-auto px-4 py-6 gap-4"

STYLE_CARD = "bg-white border border-slate-200 shadow-sm rounded-xl"

STYLE_PAGE_TITLE = "text-2xl font-bold tracking-tight text-slate-900"
STYLE_SECTION_TITLE = "text-xs font-bold text-slate-400 uppercase tracking-wider"
STYLE_TEXT_SUBTLE = "text-sm text-slate-500"

STYLE_BTN_GHOST = (
    "text-slate-600 hover:text-slate-900 hover:bg-slate-100 active:scale-[0.99] rounded-md px-3 py-2 text-sm "
    "font-semibold transition-all focus-visible:outline-none focus-visible:ring-2 focus-visible:ring-slate-400/30"
)
STYLE_BTN_GHOST_ACTIVE = "bg-amber-50 text-amber-700"

STYLE_ROW = "w-full text-sm text-slate-800 border-b border-slate-200/70 cursor-pointer hover:bg-slate-50"
STYLE_ROW_DONE = "text-slate-400"
STYLE_CHECKMARK = "text-amber-600"
