# -*- coding: utf-8 -*-
# MinIO Python Library for Amazon S3 Compatible Cloud Storage, (C)
# [2014] - [2025] MinIO, Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.


from binascii import crc32
from io import BytesIO
from unittest import TestCase

from urllib3.response import HTTPResponse

from s3messages import xml
from s3messages.enums import CompressionType, FileHeaderInfo, QuoteFields
from s3messages.error import EventStreamError, S3MessageException
from s3messages.select import (CSVInputSerialization, CSVOutputSerialization,
                               JSONInputSerialization,
                               JSONOutputSerialization,
                               ParquetInputSerialization,
                               SelectObjectContentRequest, SelectObjectReader,
                               Stats)


def _message(headers, payload=b"", value_type=7):
    header_data = b""
    for name, value in headers.items():
        header_data += bytes([len(name)]) + name.encode()
        header_data += bytes([value_type])
        header_data += len(value).to_bytes(2, "big") + value.encode()
    total_length = 16 + len(header_data) + len(payload)
    prelude = (
        total_length.to_bytes(4, "big") +
        len(header_data).to_bytes(4, "big")
    )
    data = prelude + crc32(prelude).to_bytes(4, "big") + header_data + payload
    return data + crc32(data).to_bytes(4, "big")


def _event(event_type, payload=b""):
    return _message(
        {
            ":message-type": "event",
            ":event-type": event_type,
            ":content-type": "application/octet-stream",
        },
        payload,
    )


def _stats(scanned, processed, returned):
    return (
        f"<Stats><BytesScanned>{scanned}</BytesScanned>"
        f"<BytesProcessed>{processed}</BytesProcessed>"
        f"<BytesReturned>{returned}</BytesReturned></Stats>"
    ).encode()


def _reader(*messages):
    return SelectObjectReader(
        HTTPResponse(body=BytesIO(b"".join(messages)), preload_content=False),
    )


class SelectObjectContentRequestTest(TestCase):
    def test_csv(self):
        request = SelectObjectContentRequest(
            "select * from S3Object",
            CSVInputSerialization(
                compression_type="NONE",
                file_header_info=FileHeaderInfo.USE,
                allow_quoted_record_delimiter=False,
            ),
            CSVOutputSerialization(quote_fields="ASNEEDED"),
            request_progress=True,
            scan_start_range=0,
            scan_end_range=100,
        )
        self.assertEqual(
            request.input_serialization.compression_type,
            CompressionType.NONE,
        )
        self.assertEqual(
            request.output_serialization.quote_fields, QuoteFields.ASNEEDED,
        )
        self.assertEqual(
            xml.marshal(request),
            b'<SelectObjectContentRequest '
            b'xmlns="http://s3.amazonaws.com/doc/2006-03-01/">'
            b'<Expression>select * from S3Object</Expression>'
            b'<ExpressionType>SQL</ExpressionType>'
            b'<InputSerialization><CompressionType>NONE</CompressionType>'
            b'<CSV><AllowQuotedRecordDelimiter>false'
            b'</AllowQuotedRecordDelimiter>'
            b'<FileHeaderInfo>USE</FileHeaderInfo></CSV>'
            b'</InputSerialization>'
            b'<OutputSerialization><CSV><QuoteFields>ASNEEDED</QuoteFields>'
            b'</CSV></OutputSerialization>'
            b'<RequestProgress><Enabled>true</Enabled></RequestProgress>'
            b'<ScanRange><Start>0</Start><End>100</End></ScanRange>'
            b'</SelectObjectContentRequest>',
        )

    def test_json_and_parquet(self):
        request = SelectObjectContentRequest(
            "select s.name from S3Object s",
            JSONInputSerialization(json_type="LINES"),
            JSONOutputSerialization(record_delimiter="\n"),
        )
        self.assertEqual(
            xml.marshal(request),
            b'<SelectObjectContentRequest '
            b'xmlns="http://s3.amazonaws.com/doc/2006-03-01/">'
            b'<Expression>select s.name from S3Object s</Expression>'
            b'<ExpressionType>SQL</ExpressionType>'
            b'<InputSerialization><JSON><Type>LINES</Type></JSON>'
            b'</InputSerialization>'
            b'<OutputSerialization><JSON><RecordDelimiter>\n'
            b'</RecordDelimiter></JSON></OutputSerialization>'
            b'</SelectObjectContentRequest>',
        )

        request = SelectObjectContentRequest(
            "select * from S3Object",
            ParquetInputSerialization(),
            CSVOutputSerialization(),
            scan_end_range=10,
        )
        data = xml.marshal(request)
        self.assertIn(
            b'<InputSerialization><Parquet /></InputSerialization>', data,
        )
        self.assertIn(b'<ScanRange><End>10</End></ScanRange>', data)

    def test_validation(self):
        csv_input = CSVInputSerialization()
        csv_output = CSVOutputSerialization()
        self.assertRaises(
            ValueError,
            SelectObjectContentRequest,
            "",
            csv_input,
            csv_output,
        )
        self.assertRaises(
            ValueError,
            SelectObjectContentRequest,
            "select * from S3Object",
            csv_input,
            csv_output,
            scan_start_range=-1,
        )
        self.assertRaises(
            ValueError,
            SelectObjectContentRequest,
            "select * from S3Object",
            csv_input,
            csv_output,
            scan_start_range=10,
            scan_end_range=5,
        )
        self.assertRaises(
            ValueError, CSVInputSerialization, compression_type="ZIP",
        )
        self.assertRaises(ValueError, JSONInputSerialization, json_type="XML")
        self.assertRaises(ValueError, CSVOutputSerialization,
                          quote_fields="NEVER")


class SelectObjectReaderTest(TestCase):
    def test_stream(self):
        reader = _reader(
            _event("Records", b"a,b\n"),
            _event("Cont"),
            _event("Progress", _stats(10, 10, 4)),
            _event("Records", b"c,d\n"),
            _event("Stats", _stats(20, 20, 8)),
            _event("End"),
        )
        with reader:
            self.assertEqual(b"".join(reader.stream()), b"a,b\nc,d\n")
            self.assertEqual(reader.progress(), Stats(10, 10, 4))
            self.assertEqual(reader.stats(), Stats(20, 20, 8))

    def test_stream_chunks(self):
        reader = _reader(_event("Records", b"0123456789"), _event("End"))
        self.assertEqual(
            list(reader.stream(4)), [b"0123", b"4567", b"89"],
        )
        self.assertIsNone(reader.stats())
        reader.close()

    def test_error(self):
        reader = _reader(
            _message(
                {
                    ":message-type": "error",
                    ":error-code": "InternalError",
                    ":error-message": "something went wrong",
                },
            ),
        )
        with self.assertRaises(EventStreamError) as context:
            list(reader.stream())
        self.assertEqual(context.exception.code, "InternalError")
        self.assertEqual(context.exception.message, "something went wrong")

    def test_crc_mismatch(self):
        message = bytearray(_event("Records", b"a,b\n"))
        message[-1] ^= 0xff
        reader = _reader(bytes(message))
        self.assertRaises(IOError, list, reader.stream())

        message = bytearray(_event("Records", b"a,b\n"))
        message[8] ^= 0xff
        reader = _reader(bytes(message))
        self.assertRaises(IOError, list, reader.stream())

    def test_header_value_type(self):
        message = _message(
            {":message-type": "event", ":event-type": "Records"},
            b"a,b\n",
            value_type=6,
        )
        reader = _reader(message)
        with self.assertRaises(IOError) as context:
            list(reader.stream())
        self.assertIn("header value type", str(context.exception))

    def test_truncated(self):
        reader = _reader(_event("Records", b"a,b\n")[:20])
        self.assertRaises(IOError, list, reader.stream())

    def test_unknown_event(self):
        reader = _reader(_event("Unknown", b"x"))
        self.assertRaises(S3MessageException, list, reader.stream())
