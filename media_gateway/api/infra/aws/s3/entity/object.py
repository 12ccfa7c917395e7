from dataclasses import dataclass, fields
from datetime import datetime
from typing import Optional, Union

from botocore.response import StreamingBody

from media_gateway.api.utils.string import underscore


@dataclass
class S3Object:
    body: Union[StreamingBody, bytes]
    content_length: Optional[int] = None
    content_type: Optional[str] = None
    last_modified: Optional[datetime] = None
    key: Optional[str] = None
    e_tag: Optional[str] = None

    def __init__(self, **kwargs):
        names = set([f.name for f in fields(self)])
        for f in fields(self):
            setattr(self, f.name, None)
        for k, v in kwargs.items():
            key = underscore(k)
            if key in names:
                setattr(self, key, v)
