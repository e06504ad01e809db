from pydantic import BaseModel, ConfigDict


class TelegramModel(BaseModel) :
	"""values decoded from, or sent to, telegram. immutable once built"""
	model_config = ConfigDict(frozen=True, populate_by_name=True)
