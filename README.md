# tikzkit

Helpers for building a TikZ editor with a live LaTeX preview. The package
does not depend on any GUI toolkit, and it has no dependencies outside the
standard library.

## Modules

- `tikzkit.completion`: `CompletionModel` holds the words offered for
  completion as `CompletionItem`s.
  - `update_completer(use_completion, words)` replaces the words.
  - Words that start with a backslash get the `"code-function"` icon.
  - `completion_invoked()` fixes the number of visible rows.
  - `item(row)` returns a match, or `None` if there is no such row.
- `tikzkit.latexlog`: `parse_log_text(text)` pulls the error and warning
  messages out of a LaTeX log.
  - Errors of the form `file:line: message` are reported together with the
    `l.<number>` context line.
  - That line number is shifted by 7 so that it counts lines of the TikZ code
    rather than lines of the generated document.
- `tikzkit.templates`: `RecentTemplates` keeps the recently used template
  files, most recent first, up to `max_count` of them.
  - It tracks a current choice.
  - `set_file_name()` moves a file to the top of the list.
  - `load()` and `save()` read and write a JSON settings file. `save()`
    leaves other keys in that file untouched.
  - `template_description(replace)` returns the help paragraph about the
    replacement marker.
- `tikzkit.generator`: everything needed to prepare a LaTeX run.
  - `write_latex_file()` writes `<base>.tex`. It uses a template file if
    there is one and falls back to a built-in document otherwise.
  - `write_tikz_file()` writes `<base>.pgf`.
  - Both raise `FileWriteError` when a file cannot be written.
  - `latex_input_code()` returns the inclusion code, which also records
    picture coordinates in `<base>.ktikzaux`.
  - `read_coordinates()` reads those coordinates back.
  - `latex_arguments()` and `pdftops_arguments()` build the command-line
    arguments for the two tools.
  - `LatexSearchPath` edits a `TEXINPUTS` value one directory at a time.
  - `run_summary()` turns the outcome of a run into a `RunResult` with a
    short log and a long log.
  - `TemplateStatus` says whether the template must be written again.
- `tikzkit.preview`: logic for the preview pane.
  - `PageNavigator` handles moving between the pictures of a multi-page
    document.
  - `zoom_in_factor()` and `zoom_out_factor()` give the zoom steps.
  - `mouse_coordinates()` converts a mouse position to TikZ coordinates.
  - `best_precision()` chooses how many decimals to display.
  - `preview_size_hint()` gives the preferred pane size.

## Example

```python
import tempfile
from pathlib import Path

from tikzkit.generator import latex_arguments, write_latex_file, write_tikz_file
from tikzkit.preview import zoom_in_factor

base = Path(tempfile.mkdtemp()) / "temptikzcode"
write_tikz_file(base, "\\begin{tikzpicture}\\draw (0,0) -- (1,1);\\end{tikzpicture}")
write_latex_file(base)               # built-in document, TikZ code included
print(latex_arguments(base))         # [..., '-interaction', 'nonstopmode', 'temptikzcode.tex']
print(zoom_in_factor(1.0))           # 1.2
```

## What it does not do

- It does not start LaTeX, pdftops or any other program. It writes the input
  files and returns the argument lists, and it reports on a run once you give
  it the outcome. Running the tools is up to the caller.
- It does not render PDF pages or show anything on screen. There is no editor
  window, and no text buffer with cursor, search or replace.
- It does not store user snippets.

## Tests

Install the test extra with `pip install tikzkit[test]`, then run `pytest`.