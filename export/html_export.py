"""HTML 내보내기: PrintDocument를 독립 실행 가능한 HTML 문서로 만든다."""

from html import escape
from pathlib import Path

from config.schema import DocumentStyle
from export.document import PrintDocument
from export.helpers import COLORS

_SIMPLE_CSS = f"""
body {{ font-family: 'Malgun Gothic', sans-serif; margin: 20px; }}
h1 {{ text-align: center; color: #333; }}
.summary {{ text-align: center; color: #{COLORS["muted"]}; }}
table {{ width: 100%; border-collapse: collapse; margin-top: 20px; }}
th, td {{ border: 1px solid #ddd; padding: 12px; text-align: left; }}
th {{ background-color: #f5f5f5; font-weight: bold; }}
.subject {{ font-weight: bold; color: #{COLORS["subject"]}; }}
.chapter {{ color: #{COLORS["chapter"]}; }}
"""

_MODERN_CSS = f"""
body {{
  font-family: 'Noto Sans KR', 'Malgun Gothic', sans-serif;
  margin: 0; padding: 40px; background-color: #f8fafc; color: #1e293b;
}}
.container {{
  max-width: 900px; margin: 0 auto; background: white; padding: 48px;
  border-radius: 24px; box-shadow: 0 20px 25px -5px rgb(0 0 0 / 0.1);
}}
.header {{
  text-align: center; margin-bottom: 48px; padding-bottom: 24px;
  border-bottom: 3px solid #{COLORS["border"]};
}}
h1 {{ font-size: 36px; font-weight: 700; color: #{COLORS["title"]}; margin: 0 0 16px 0; }}
.summary {{ font-size: 18px; color: #{COLORS["muted"]}; margin: 0; font-weight: 500; }}
table {{ width: 100%; border-collapse: separate; border-spacing: 0; margin-top: 32px; }}
th {{
  background: #{COLORS["header"]}; padding: 20px; text-align: left; font-weight: 600;
  color: #{COLORS["header_text"]}; border-bottom: 2px solid #{COLORS["border"]};
}}
td {{ padding: 20px; border-bottom: 1px solid #{COLORS["border"]}; vertical-align: middle; }}
tr:last-child td {{ border-bottom: none; }}
.week, .subject, .chapter {{
  font-weight: 600; padding: 8px 16px; border-radius: 8px; display: inline-block;
}}
.week {{ color: #{COLORS["title"]}; background: #eff6ff; }}
.subject {{ color: #{COLORS["subject"]}; background: #eff6ff; }}
.chapter {{ color: #{COLORS["chapter"]}; background: #fef2f2; }}
.details {{ color: #475569; line-height: 1.6; }}
@media print {{
  body {{ background: white; padding: 0; }}
  .container {{ box-shadow: none; padding: 24px; max-width: 100%; }}
  .header {{ margin-bottom: 24px; }}
}}
"""

_PRINT_SCRIPT = "<script>window.addEventListener('load', function () { window.print(); });</script>"


class HtmlExporter:
    """PrintDocument를 HTML 문자열 또는 파일로 내보낸다."""

    def __init__(self, print_on_open: bool = False):
        self.print_on_open = print_on_open

    # ─── 공개 API ─────────────────────────────────────────────────────────────

    def render(self, document: PrintDocument) -> str:
        if document.style == DocumentStyle.SIMPLE:
            css, body = _SIMPLE_CSS, self._simple_body(document)
        else:
            css, body = _MODERN_CSS, self._modern_body(document)

        script = _PRINT_SCRIPT if self.print_on_open else ""
        return (
            "<!DOCTYPE html>\n"
            '<html lang="ko">\n'
            "<head>\n"
            '<meta charset="utf-8">\n'
            f"<title>{escape(document.title)}</title>\n"
            f"<style>{css}</style>\n"
            "</head>\n"
            f"<body>\n{body}\n{script}\n</body>\n"
            "</html>\n"
        )

    def export(self, document: PrintDocument, output_path: Path) -> None:
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(self.render(document), encoding="utf-8")

    # ─── 본문 ─────────────────────────────────────────────────────────────────

    def _thead(self, document: PrintDocument) -> str:
        cells = "".join(f"<th>{escape(c)}</th>" for c in document.columns)
        return f"<thead><tr>{cells}</tr></thead>"

    def _simple_body(self, document: PrintDocument) -> str:
        rows = "".join(
            "<tr>"
            f"<td>{escape(r.period)}</td>"
            f'<td class="subject">{escape(r.subject)}</td>'
            f'<td class="chapter">{escape(r.chapter)}</td>'
            f"<td>{escape(r.details)}</td>"
            "</tr>\n"
            for r in document.rows
        )
        return (
            f"<h1>{escape(document.title)}</h1>\n"
            f'<p class="summary">{escape(document.summary)}</p>\n'
            f"<table>{self._thead(document)}<tbody>\n{rows}</tbody></table>"
        )

    def _modern_body(self, document: PrintDocument) -> str:
        rows = "".join(
            "<tr>"
            f'<td><span class="week">{escape(r.period)}</span></td>'
            f'<td><span class="subject">{escape(r.subject)}</span></td>'
            f'<td><span class="chapter">{escape(r.chapter)}</span></td>'
            f'<td><div class="details">{escape(r.details)}</div></td>'
            "</tr>\n"
            for r in document.rows
        )
        return (
            '<div class="container">\n'
            '<div class="header">\n'
            f"<h1>{escape(document.title)}</h1>\n"
            f'<p class="summary">{escape(document.summary)}</p>\n'
            "</div>\n"
            f"<table>{self._thead(document)}<tbody>\n{rows}</tbody></table>\n"
            "</div>"
        )
