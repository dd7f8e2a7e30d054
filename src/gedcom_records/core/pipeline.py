from __future__ import annotations

from gedcom_records.core.context import ParseContext
from gedcom_records.core.exceptions import GedcomError, ParseExecutionError
from gedcom_records.exporter import export_data_to_json
from gedcom_records.parser import ParserOptions, parse_file
from gedcom_records.tree import GedcomData


class Pipeline:
    """
    Orchestrates load → parse → (optional) JSON export.
    No parsing logic lives here.
    """

    def __init__(self, context: ParseContext):
        self.ctx = context
        self.log = context.logger

    def run(self) -> GedcomData:
        self.log.info("Pipeline starting: %s", self.ctx.input_path)

        options = self.ctx.options or ParserOptions.from_config(self.ctx.config)

        try:
            result = parse_file(self.ctx.input_path, options)
            self.ctx.diagnostics.extend(result.diagnostics)
            self.ctx.stats.update(result.data.stats())
            self.ctx.stats["errors"] = len(result.errors)
            self.ctx.stats["warnings"] = len(result.warnings)

            if self.ctx.output_path:
                export_data_to_json(result.data, self.ctx.output_path)

            self.log.info("Pipeline completed successfully")

            return result.data

        except (GedcomError, FileNotFoundError):
            raise
        except Exception as exc:
            self.log.exception("Pipeline execution failed")
            raise ParseExecutionError(str(exc)) from exc
