"""Full page shell around the document regions."""

from __future__ import annotations

from html import escape

from puppybowl.dom import Document


def render_page(document: Document) -> str:
    notices_html = "".join(
        f"<div class=\"success-message\">{escape(notice.message)}</div>" for notice in document.notices()
    )
    toggle_label = "Hide Form" if document.form_visible else "Add New Player"
    return f"""<!DOCTYPE html>
<html lang=\"en\">
<head>
    <meta charset=\"utf-8\">
    <title>Puppy Bowl</title>
    <style>
        body {{ font-family: Arial, sans-serif; margin: 2rem; background: #f5f7fa; }}
        main {{ background: #fff; padding: 2rem; border-radius: 12px; box-shadow: 0 2px 6px rgba(0,0,0,0.08); }}
        header form {{ margin-bottom: 1rem; }}
        button {{ padding: 0.6rem 1.2rem; border-radius: 6px; border: none; background: #2563eb; color: #fff; cursor: pointer; }}
        button.remove-button {{ background: #b91c1c; }}
        #all-players-container {{ display: grid; grid-template-columns: repeat(auto-fill, minmax(220px, 1fr)); gap: 1rem; }}
        .player-card {{ border: 1px solid #e2e8f0; border-radius: 8px; padding: 1rem; background: #f8fafc; }}
        .player-card img {{ width: 100%; border-radius: 6px; }}
        .button-container {{ display: flex; gap: 0.5rem; }}
        .form-group {{ display: grid; gap: 0.25rem; margin-bottom: 0.75rem; }}
        .form-group input, .form-group select {{ padding: 0.5rem; border-radius: 6px; border: 1px solid #cbd5e1; }}
        .detail-image {{ max-width: 400px; border-radius: 8px; }}
        .success-message {{ padding: 1rem; border-radius: 6px; margin-bottom: 1rem; background: #ecfdf5; color: #047857; }}
        .flash.error {{ padding: 1rem; border-radius: 6px; background: #fef2f2; color: #b91c1c; }}
    </style>
</head>
<body>
    <header>
        <h1>Puppy Bowl</h1>
        <form method=\"post\" action=\"/ui/events\">
            <button type=\"submit\" id=\"new-player-button\" name=\"toggle-form\" value=\"1\">{toggle_label}</button>
        </form>
        {notices_html}
    </header>
    <main>{document.main_markup()}</main>
</body>
</html>"""
