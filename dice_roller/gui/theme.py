from nicegui import ui


class Theme:
    # Colors (Tailwind classes)
    bg_primary = "bg-slate-900"
    bg_secondary = "bg-slate-800"
    bg_tertiary = "bg-slate-700"

    text_primary = "text-gray-100"
    text_secondary = "text-gray-400"
    text_accent = "text-red-400"
    text_total = "text-yellow-400"

    card = "w-full bg-slate-800 border border-slate-700 rounded-lg p-4"

    @staticmethod
    def apply_global_styles():
        """Injects global CSS for scrollbars and background."""
        ui.add_head_html("""
            <style>
                body { background-color: #0f172a; color: #f3f4f6; }
                ::-webkit-scrollbar { width: 8px; }
                ::-webkit-scrollbar-track { background: #1e293b; }
                ::-webkit-scrollbar-thumb { background: #475569; border-radius: 4px; }
                ::-webkit-scrollbar-thumb:hover { background: #64748b; }
            </style>
        """)

    @staticmethod
    def header():
        return ui.header().classes(
            "bg-slate-950 border-b border-slate-800 h-16 items-center px-4"
        )

    @staticmethod
    def section_title(text: str):
        return ui.label(text).classes("text-xl font-semibold text-gray-100")
