"""Files, command lines and run reports used when typesetting a TikZ preview."""

from __future__ import annotations

import enum
import os
from dataclasses import dataclass
from pathlib import Path

TEXINPUTS = "TEXINPUTS"

_DEFAULT_DOCUMENT_HEAD = (
    "\\documentclass[12pt]{article}\n"
    "\\usepackage{tikz}\n"
    "\\usepackage{pgf}\n"
    "\\usepackage[active,tightpage]{preview}\n"
    "\\PreviewEnvironment[]{tikzpicture}\n"
    "\\PreviewEnvironment[]{pgfpicture}\n"
    "\\begin{document}\n"
)
_DEFAULT_DOCUMENT_TAIL = "\\end{document}\n"

# Redefines \endtikzpicture so that the unit lengths and the bounding box of
# every picture are written to "<jobname>.ktikzaux".
_AUX_PROLOGUE = "\n".join([
    r"\makeatletter",
    r"\ifdefined\endtikzpicture%",
    r"  \newdimen\ktikzorigx",
    r"  \newdimen\ktikzorigy",
    r"  \newwrite\ktikzauxfile",
    r"  \immediate\openout\ktikzauxfile\jobname.ktikzaux",
    r"  \let\oldendtikzpicture\endtikzpicture",
    r"  \def\endtikzpicture{%",
    r"    \pgfextractx{\ktikzorigx}{\pgfpointxy{1}{0}}",
    r"    \pgfextracty{\ktikzorigy}{\pgfpointxy{0}{1}}",
    r"    \pgfmathsetmacro{\ktikzunitx}{\ktikzorigx}",
    r"    \pgfmathsetmacro{\ktikzunity}{\ktikzorigy}",
    r"    \pgfmathsetmacro{\ktikzminx}{\csname pgf@picminx\endcsname}",
    r"    \pgfmathsetmacro{\ktikzmaxx}{\csname pgf@picmaxx\endcsname}",
    r"    \pgfmathsetmacro{\ktikzminy}{\csname pgf@picminy\endcsname}",
    r"    \pgfmathsetmacro{\ktikzmaxy}{\csname pgf@picmaxy\endcsname}",
    r"    \immediate\write\ktikzauxfile{\ktikzunitx;\ktikzunity;\ktikzminx;"
    r"\ktikzmaxx;\ktikzminy;\ktikzmaxy}",
    r"    \oldendtikzpicture",
    r"  }",
    r"\fi",
    r"\makeatother",
])
_AUX_EPILOGUE = "\n".join([
    r"\makeatletter",
    r"\ifdefined\endtikzpicture%",
    r"  \immediate\closeout\ktikzauxfile",
    r"\fi",
    r"\makeatother",
])


class TemplateStatus(enum.IntEnum):
    """Whether the LaTeX template must be written again before a run."""

    DONT_RELOAD_TEMPLATE = 0
    RELOAD_TEMPLATE = 1


class FileWriteError(OSError):
    """A generated file could not be written."""

    def __init__(self, file_name: str, reason: str) -> None:
        super().__init__(f'Cannot write file "{file_name}":\n{reason}')
        self.file_name = file_name
        self.reason = reason

    def __str__(self) -> str:
        return self.args[0]


@dataclass(frozen=True)
class RunResult:
    """Outcome of running an external tool: a short and a detailed report."""

    short_log: str
    long_log: str
    failed: bool

    @property
    def succeeded(self) -> bool:
        return not self.failed


class LatexSearchPath:
    """The value of the ``TEXINPUTS`` search path, edited one directory at a time.

    Without a ``value`` the current environment's ``TEXINPUTS`` is used.
    """

    def __init__(self, value: str | None = None, separator: str = os.pathsep) -> None:
        if not separator:
            raise ValueError("separator must not be empty")
        self.value = os.environ.get(TEXINPUTS, "") if value is None else value
        self.separator = separator

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"LatexSearchPath(value={self.value!r}, separator={self.separator!r})"

    def add(self, path: str | os.PathLike[str]) -> None:
        """Put ``path`` in front of the search path unless it is already there."""
        entry = os.fspath(path) + self.separator
        if entry not in self.value:
            self.value = entry + self.value

    def remove(self, path: str | os.PathLike[str]) -> None:
        """Drop every occurrence of ``path`` from the search path."""
        entry = os.fspath(path) + self.separator
        if entry in self.value:
            self.value = self.value.replace(entry, "")


def _split_lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def _to_float(text: str) -> float:
    text = text.strip()
    if "_" in text:
        return 0.0
    try:
        return float(text)
    except ValueError:
        return 0.0


def read_coordinates(base_name: str | os.PathLike[str]) -> list[float]:
    """Read the picture coordinates written next to ``base_name`` during a run.

    Values that are not numbers count as 0; a missing file gives an empty list.
    """
    path = Path(os.fspath(base_name) + ".ktikzaux").absolute()
    try:
        text = path.read_text(encoding="utf-8", errors="replace")
    except OSError:
        return []
    return [_to_float(field)
            for line in _split_lines(text)
            for field in line.split(";")]


def latex_input_code(base_name: str | os.PathLike[str]) -> str:
    """Return the LaTeX code that includes the TikZ file and records its coordinates."""
    return _AUX_PROLOGUE + "\\input{" + os.fspath(base_name) + ".pgf}" + _AUX_EPILOGUE


def _reason(exc: BaseException) -> str:
    if isinstance(exc, OSError) and exc.strerror:
        return exc.strerror
    return str(exc)


def _read_template_lines(template_file: str | os.PathLike[str] | None,
                         encoding: str) -> list[str] | None:
    if not template_file:
        return None
    path = Path(template_file)
    if not path.is_file():
        return None
    try:
        text = path.read_text(encoding=encoding)
    except (OSError, UnicodeError):
        return None
    return _split_lines(text)


def write_latex_file(base_name: str | os.PathLike[str],
                     template_file: str | os.PathLike[str] | None = None,
                     replace_text: str = "<>",
                     encoding: str = "utf-8") -> Path:
    """Write ``<base_name>.tex``, the document that typesets the TikZ code.

    A readable ``template_file`` is used with every occurrence of
    ``replace_text`` replaced by the inclusion code; otherwise (or when
    ``replace_text`` is empty) a built-in document is written.
    """
    tex_path = Path(os.fspath(base_name) + ".tex")
    input_code = latex_input_code(base_name)
    try:
        handle = tex_path.open("w", encoding=encoding, newline="")
    except OSError as exc:
        raise FileWriteError(str(tex_path), _reason(exc)) from exc

    lines = _read_template_lines(template_file, encoding) if replace_text else None
    if lines is not None:
        content = "".join(line.replace(replace_text, input_code) + "\n" for line in lines)
    else:
        content = _DEFAULT_DOCUMENT_HEAD + input_code + "\n" + _DEFAULT_DOCUMENT_TAIL

    with handle:
        try:
            handle.write(content)
        except (OSError, UnicodeError) as exc:
            raise FileWriteError(str(tex_path), _reason(exc)) from exc
    return tex_path


def write_tikz_file(base_name: str | os.PathLike[str], tikz_code: str,
                    encoding: str = "utf-8") -> Path:
    """Write the TikZ code to ``<base_name>.pgf`` followed by a newline."""
    pgf_path = Path(os.fspath(base_name) + ".pgf")
    try:
        with pgf_path.open("w", encoding=encoding, newline="") as handle:
            handle.write(tikz_code + "\n")
    except (OSError, UnicodeError) as exc:
        raise FileWriteError(
            str(pgf_path), f'Could not open "{os.fspath(base_name)}".') from exc
    return pgf_path


def latex_arguments(base_name: str | os.PathLike[str], latex_command: str = "pdflatex",
                    shell_escape: bool = False) -> list[str]:
    """Return the arguments for running ``latex_command`` in the directory of ``base_name``."""
    if latex_command == "context":
        # ConTeXt cannot enable \write18 from the command line.
        arguments = ["--nonstopmode"]
    else:
        arguments = ["-shell-escape"] if shell_escape else []
        arguments += ["-halt-on-error", "-file-line-error", "-interaction", "nonstopmode"]
    arguments.append(Path(os.fspath(base_name) + ".tex").name)
    return arguments


def pdftops_arguments(base_name: str | os.PathLike[str], page: int) -> list[str]:
    """Return the arguments that convert the 0-based ``page`` of the PDF to EPS."""
    if page < 0:
        raise ValueError("page must not be negative")
    number = str(page + 1)
    base = os.fspath(base_name)
    return ["-f", number, "-l", number, "-eps", base + ".pdf", base + ".eps"]


def run_summary(name: str, command: str, arguments: list[str], started: bool = True,
                aborted: bool = False, exit_code: int = 0) -> RunResult:
    """Describe how a run of ``command`` ended, for the status line and the log."""
    prefix = f"[{name}] "
    command_line = "\nCommand: " + command + " " + " ".join(arguments)
    if aborted:
        short = prefix + "Process aborted."
        return RunResult(short, short, True)
    if not started:
        short = prefix + "Error: the process could not be started."
        return RunResult(short, short + command_line, True)
    if exit_code == 0:
        short = prefix + "Process finished successfully."
        return RunResult(short, short, False)
    short = prefix + "Error: run failed."
    return RunResult(short, short + command_line, True)