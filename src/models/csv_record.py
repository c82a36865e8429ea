"""
Row type produced by CSV ingestion.

A CsvRecord maps each header column to the cell value of one data row.
Keys come from the header line in header order and values are always
strings; no numeric coercion is applied.
"""
from typing import Dict

CsvRecord = Dict[str, str]
