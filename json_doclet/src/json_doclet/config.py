# --- Run configuration -------------------------------------------------------
from dataclasses import dataclass

DEFAULT_OUTPUT_PATH = "./docs.json"


@dataclass(frozen=True)
class DocletConfig:
    """
    Everything a single run needs besides the symbol model.
    Passed explicitly to the assembler and the writer; there is no global setting.
    """
    output_path: str = DEFAULT_OUTPUT_PATH
    indent: int = 2  # spaces per nesting level in the written JSON
    sort_by_name: bool = False  # sort classes/packages by qualified name instead of provider order

    def __post_init__(self):
        if self.indent < 0:
            raise ValueError(f"indent must be >= 0, got {self.indent}")
