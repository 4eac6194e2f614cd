# backend/schemas/common.py
from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, ConfigDict, PlainSerializer
from pydantic.alias_generators import to_camel

from utils.time_utils import to_utc_z

# UTC-naive datetimes leave the API as ISO-8601 strings with a trailing 'Z'
UtcDatetime = Annotated[datetime, PlainSerializer(to_utc_z, return_type=str)]


# Base configuration: ORM compatibility and camelCase on the wire
class ApiModel(BaseModel):
    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)
