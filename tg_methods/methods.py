from typing import Any, ClassVar, Dict, List, Optional, Tuple, Union

from tg_methods.config.constants import telegram_host
from tg_methods.models import TelegramModel
from tg_methods.models.identifiers import ChatId, MessageId, UpdateId, UserId, int64_max, int64_min
from tg_methods.models.telegram import Chat, ChatMember, ForceReply, InlineKeyboardMarkup, Message, ParseMode, ReplyKeyboardMarkup, ReplyKeyboardRemove, Update, User, UserProfilePhotos, WebhookInfo
from tg_methods.models.untagged import UntaggedUnion, scalar, structural
from tg_methods.response import decode_response


################################################## UNTAGGED UNIONS ##################################################


def _is_int64(value: Any) -> bool :
	# json true/false are not chat ids
	return isinstance(value, int) and not isinstance(value, bool) and int64_min <= value <= int64_max


chat_target: UntaggedUnion = UntaggedUnion(
	'ChatTarget',
	# integer first, then string. a string of digits stays a username
	scalar('Id', ChatId, _is_int64, ChatId),
	scalar('Username', str, lambda x : isinstance(x, str)),
)

ChatTarget = chat_target.annotate()
"""a chat's integer id, or the username of a channel or supergroup (@channelusername). sent as a bare json number or string"""


reply_markup: UntaggedUnion = UntaggedUnion(
	'ReplyMarkup',
	structural(InlineKeyboardMarkup, 'inline_keyboard'),
	structural(ReplyKeyboardMarkup, 'keyboard'),
	structural(ReplyKeyboardRemove, 'remove_keyboard'),
	structural(ForceReply, 'force_reply'),
)

ReplyMarkup = reply_markup.annotate()


################################################## METHOD BINDING ##################################################


class Method(TelegramModel) :
	"""
	parameters of a single telegram bot api method.

	every subclass is bound, by its class attributes, to exactly one endpoint and to the type
	its result decodes to on success:
		endpoint: the method name in the url, ex: sendMessage
		returns: the type of the envelope's result
	"""

	endpoint: ClassVar[str]
	returns: ClassVar[Any]


	@classmethod
	def endpoint_url(cls, token: str, origin: str = telegram_host) -> str :
		return f'{origin.rstrip("/")}/bot{token}/{cls.endpoint}'


	def body(self) -> Dict[str, Any] :
		"""json ready request body. unset optional fields are left out entirely, never sent as null"""
		return self.model_dump(mode='json', by_alias=True, exclude_none=True)


	@classmethod
	def decode(cls, raw: Union[bytes, str, Dict[str, Any]]) -> Any :
		"""
		:return: the decoded result, or an ApiError if telegram reported a failure
		:raises MalformedResponse: see decode_response
		"""
		return decode_response(cls.returns, raw)


################################################## UPDATES ##################################################


class GetUpdates(Method) :
	"""receive incoming updates using long polling"""
	endpoint: ClassVar[str] = 'getUpdates'
	returns: ClassVar[Any] = List[Update]

	offset: Optional[UpdateId] = None
	"""Identifier of the first update to be returned, one greater than the highest previously received update_id"""
	limit: Optional[int] = None
	"""1-100, defaults to 100"""
	timeout: Optional[int] = None
	"""Long polling timeout in seconds"""
	allowed_updates: Optional[Tuple[str, ...]] = None


	def with_offset(self, offset: UpdateId) -> 'GetUpdates' :
		return self.model_copy(update={ 'offset': offset })


class SetWebhook(Method) :
	endpoint: ClassVar[str] = 'setWebhook'
	returns: ClassVar[Any] = bool

	url: str
	"""HTTPS url to send updates to, an empty string removes the webhook"""
	max_connections: Optional[int] = None
	allowed_updates: Optional[Tuple[str, ...]] = None


class DeleteWebhook(Method) :
	endpoint: ClassVar[str] = 'deleteWebhook'
	returns: ClassVar[Any] = bool


class GetWebhookInfo(Method) :
	endpoint: ClassVar[str] = 'getWebhookInfo'
	returns: ClassVar[Any] = WebhookInfo


################################################## USERS AND CHATS ##################################################


class GetMe(Method) :
	endpoint: ClassVar[str] = 'getMe'
	returns: ClassVar[Any] = User


class GetUserProfilePhotos(Method) :
	endpoint: ClassVar[str] = 'getUserProfilePhotos'
	returns: ClassVar[Any] = UserProfilePhotos

	user_id: UserId
	offset: Optional[int] = None
	limit: Optional[int] = None


class GetChat(Method) :
	endpoint: ClassVar[str] = 'getChat'
	returns: ClassVar[Any] = Chat

	chat_id: ChatTarget


class GetChatMembersCount(Method) :
	endpoint: ClassVar[str] = 'getChatMemberCount'
	returns: ClassVar[Any] = int

	chat_id: ChatTarget


class GetChatAdministrators(Method) :
	"""every administrator except other bots. if none were appointed, only the creator is returned"""
	endpoint: ClassVar[str] = 'getChatAdministrators'
	returns: ClassVar[Any] = List[ChatMember]

	chat_id: ChatTarget


class GetChatMember(Method) :
	endpoint: ClassVar[str] = 'getChatMember'
	returns: ClassVar[Any] = ChatMember

	chat_id: ChatTarget
	user_id: UserId


################################################## MESSAGES ##################################################


class SendMessage(Method) :
	endpoint: ClassVar[str] = 'sendMessage'
	returns: ClassVar[Any] = Message

	chat_id: ChatTarget
	text: str
	parse_mode: Optional[ParseMode] = None
	disable_web_page_preview: Optional[bool] = False
	disable_notification: Optional[bool] = False
	reply_to_message_id: Optional[MessageId] = None
	reply_markup: Optional[ReplyMarkup] = None


	@classmethod
	def reply(cls, chat_id: Union[ChatId, str], text: str, message_id: MessageId, **kwargs: Any) -> 'SendMessage' :
		return cls(chat_id=chat_id, text=text, reply_to_message_id=message_id, **kwargs)


class ForwardMessage(Method) :
	endpoint: ClassVar[str] = 'forwardMessage'
	returns: ClassVar[Any] = Message

	chat_id: ChatTarget
	from_chat_id: ChatTarget
	message_id: MessageId


# the edit methods target either chat_id + message_id, or inline_message_id for messages sent via inline mode


class EditMessageText(Method) :
	endpoint: ClassVar[str] = 'editMessageText'
	returns: ClassVar[Any] = Message

	chat_id: Optional[ChatTarget] = None
	message_id: Optional[MessageId] = None
	inline_message_id: Optional[str] = None
	text: str
	parse_mode: Optional[ParseMode] = None
	disable_web_page_preview: Optional[bool] = None
	reply_markup: Optional[InlineKeyboardMarkup] = None


class EditMessageCaption(Method) :
	endpoint: ClassVar[str] = 'editMessageCaption'
	returns: ClassVar[Any] = bool

	chat_id: Optional[ChatTarget] = None
	message_id: Optional[MessageId] = None
	inline_message_id: Optional[str] = None
	caption: Optional[str] = None
	parse_mode: Optional[ParseMode] = None
	reply_markup: Optional[InlineKeyboardMarkup] = None


class EditMessageReplyMarkup(Method) :
	# the edited message for messages the bot sent itself, true for inline messages
	endpoint: ClassVar[str] = 'editMessageReplyMarkup'
	returns: ClassVar[Any] = Union[Message, bool]

	chat_id: Optional[ChatTarget] = None
	message_id: Optional[MessageId] = None
	inline_message_id: Optional[str] = None
	reply_markup: Optional[InlineKeyboardMarkup] = None


class DeleteMessage(Method) :
	"""messages can only be deleted within 48 hours of being sent"""
	endpoint: ClassVar[str] = 'deleteMessage'
	returns: ClassVar[Any] = bool

	chat_id: ChatTarget
	message_id: MessageId
