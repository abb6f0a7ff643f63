"""렌더링 표면: 완성된 문서 한 부를 받아 보여주거나 저장한다.

표면은 내보내기 호출마다 새로 얻고 붙잡아 두지 않는다. 표면을 쓸 수
없으면 present()는 False를 돌려주고 내보내기는 아무 일도 하지 않은 것이 된다.
"""

import logging
import tempfile
import webbrowser
from pathlib import Path
from typing import Optional

from export.document import PrintDocument
from export.html_export import HtmlExporter

logger = logging.getLogger(__name__)


class RenderingSurface:
    """문서를 한 번 넘겨받는 곳."""

    def present(self, document: PrintDocument) -> bool:
        raise NotImplementedError


class BrowserSurface(RenderingSurface):
    """HTML을 임시 파일로 쓰고 기본 브라우저로 연다 (열리면 인쇄 대화상자)."""

    def __init__(self, print_on_open: bool = True, directory: Optional[Path] = None):
        self.html = HtmlExporter(print_on_open=print_on_open)
        self.directory = directory
        self.last_path: Optional[Path] = None

    def present(self, document: PrintDocument) -> bool:
        try:
            with tempfile.NamedTemporaryFile(
                "w", suffix=".html", prefix="jindo_", encoding="utf-8",
                dir=self.directory, delete=False,
            ) as f:
                f.write(self.html.render(document))
                path = Path(f.name)
            opened = webbrowser.open(path.resolve().as_uri())
        except (OSError, webbrowser.Error) as e:
            logger.warning(f"브라우저로 문서를 열 수 없습니다: {e}")
            return False

        if not opened:
            logger.warning(f"브라우저를 찾을 수 없습니다 – 문서는 {path}에 있습니다")
            return False
        self.last_path = path
        return True

    def __str__(self) -> str:
        return "브라우저"


class FileSurface(RenderingSurface):
    """확장자에 따라 HTML, PDF, Excel 파일로 저장한다.

    PDF는 생성 시점에 폰트를 확인하므로 폰트가 없으면 PdfFontError가 난다.
    """

    SUFFIXES = (".html", ".htm", ".pdf", ".xlsx")

    def __init__(self, path: Path, print_on_open: bool = False,
                 pdf_font_path: Optional[str] = None):
        self.path = Path(path)
        suffix = self.path.suffix.lower()
        if suffix in (".html", ".htm"):
            self._exporter = HtmlExporter(print_on_open=print_on_open)
        elif suffix == ".pdf":
            from export.pdf_export import PdfExporter
            self._exporter = PdfExporter(font_path=pdf_font_path)
        elif suffix == ".xlsx":
            from export.excel_export import ExcelExporter
            self._exporter = ExcelExporter()
        else:
            raise ValueError(
                f"지원하지 않는 파일 형식: '{self.path.suffix}' "
                f"(가능: {', '.join(self.SUFFIXES)})"
            )

    def present(self, document: PrintDocument) -> bool:
        try:
            self._exporter.export(document, self.path)
        except OSError as e:
            logger.warning(f"파일을 저장할 수 없습니다: {self.path} ({e})")
            return False
        return True

    def __str__(self) -> str:
        return str(self.path)
