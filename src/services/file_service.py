"""
File Service for CSV processing.
Streams an uploaded CSV into row mappings keyed by the header line.
"""
import codecs
import csv
from typing import List, BinaryIO
from src.models.csv_record import CsvRecord
from src.core.exceptions import CSVProcessingException


class FileService:
    """Service for file processing operations."""
    
    ENCODING = 'utf-8-sig'
    
    def parse_csv(self, file: BinaryIO) -> List[CsvRecord]:
        """
        Parse a CSV stream into one record per data row.
        
        The first line is the header. The stream is decoded and read line
        by line, and the result is only returned once every row has been
        read, so a failure part way through never yields partial data.
        
        Args:
            file: Binary stream positioned at the start of the CSV
            
        Returns:
            List of records in file order; empty for an empty file or a
            file holding only a header
            
        Raises:
            CSVProcessingException: If the stream cannot be read or decoded
        """
        try:
            reader = csv.reader(codecs.getreader(self.ENCODING)(file))
            header = next(reader, None)
            if header is None:
                return []
            
            records = []
            for row in reader:
                if not row:
                    continue
                records.append(self._row_to_record(header, row))
            return records
            
        except UnicodeDecodeError as e:
            raise CSVProcessingException("File must be a valid UTF-8 encoded CSV") from e
        except Exception as e:
            raise CSVProcessingException(f"Failed to parse CSV file: {str(e)}") from e
    
    def _row_to_record(self, header: List[str], row: List[str]) -> CsvRecord:
        """
        Pair a row's cells with the header columns.
        
        Short rows get empty strings for the missing columns; cells beyond
        the header are keyed by position as "_<index>".
        """
        record = {}
        for index, value in enumerate(row):
            column = header[index] if index < len(header) else f"_{index}"
            record[column] = value
        for column in header[len(row):]:
            record[column] = ""
        return record
