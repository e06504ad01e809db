from datetime import datetime
from enum import Enum
from typing import Annotated, List, Literal, Optional, Tuple, Union

from pydantic import Field, PlainSerializer

from tg_methods.models import TelegramModel
from tg_methods.models.identifiers import ChatId, MessageId, UpdateId, UserId


UnixTime = Annotated[datetime, PlainSerializer(lambda x : int(x.timestamp()), return_type=int, when_used='json')]
"""telegram sends dates as unix timestamps, and they're encoded back the same way"""


################################################## MARKUP MODELS ##################################################


class ParseMode(Enum) :
	markdown: str = 'Markdown'
	markdown_v2: str = 'MarkdownV2'
	html: str = 'HTML'


class WebAppInfo(TelegramModel) :
	url: str
	"""HTTPS URL of the Web App to open"""


class LoginUrl(TelegramModel) :
	url: str
	"""HTTPS URL opened with user authorization data added to the query string"""
	forward_text: Optional[str] = None
	bot_username: Optional[str] = None
	request_write_access: Optional[bool] = None


class InlineKeyboardButton(TelegramModel) :
	text: str
	"""Label text on the button"""
	url: Optional[str] = None
	"""HTTP or tg:// URL opened when the button is pressed"""
	callback_data: Optional[str] = None
	"""Sent back to the bot in a callback query when the button is pressed, 1-64 bytes"""
	web_app: Optional[WebAppInfo] = None
	login_url: Optional[LoginUrl] = None
	switch_inline_query: Optional[str] = None
	switch_inline_query_current_chat: Optional[str] = None
	pay: Optional[bool] = None
	"""Must always be the first button in the first row"""


class InlineKeyboardMarkup(TelegramModel) :
	inline_keyboard: Tuple[Tuple[InlineKeyboardButton, ...], ...]
	"""Rows of buttons"""


class KeyboardButtonPollType(TelegramModel) :
	type: Optional[str] = None
	"""quiz or regular; any type is allowed when left out"""


class KeyboardButton(TelegramModel) :
	text: str
	request_contact: Optional[bool] = None
	request_location: Optional[bool] = None
	request_poll: Optional[KeyboardButtonPollType] = None
	web_app: Optional[WebAppInfo] = None


class ReplyKeyboardMarkup(TelegramModel) :
	keyboard: Tuple[Tuple[KeyboardButton, ...], ...]
	"""Rows of buttons"""
	is_persistent: Optional[bool] = None
	resize_keyboard: Optional[bool] = None
	one_time_keyboard: Optional[bool] = None
	input_field_placeholder: Optional[str] = None
	"""Shown in the input field while the keyboard is active; 1-64 characters"""
	selective: Optional[bool] = None


class ReplyKeyboardRemove(TelegramModel) :
	remove_keyboard: Literal[True] = True
	"""Asks clients to remove the custom keyboard"""
	selective: Optional[bool] = None


class ForceReply(TelegramModel) :
	force_reply: Literal[True] = True
	"""Shows the reply interface, as if the user had tapped 'Reply' on the bot's message"""
	input_field_placeholder: Optional[str] = None
	selective: Optional[bool] = None


################################################## RESPONSE MODELS ##################################################


class User(TelegramModel) :
	id: UserId
	is_bot: bool
	first_name: str
	last_name: Optional[str] = None
	username: Optional[str] = None
	language_code: Optional[str] = None
	"""IETF language tag of the user's language"""
	is_premium: Optional[bool] = None
	can_join_groups: Optional[bool] = None
	"""Returned only in getMe"""
	can_read_all_group_messages: Optional[bool] = None
	"""Returned only in getMe. True if privacy mode is disabled for the bot"""
	supports_inline_queries: Optional[bool] = None
	"""Returned only in getMe"""


class ChatPhoto(TelegramModel) :
	small_file_id: str
	small_file_unique_id: str
	big_file_id: str
	big_file_unique_id: str


class ChatPermissions(TelegramModel) :
	can_send_messages: Optional[bool] = None
	can_send_media_messages: Optional[bool] = None
	can_send_polls: Optional[bool] = None
	can_send_other_messages: Optional[bool] = None
	can_add_web_page_previews: Optional[bool] = None
	can_change_info: Optional[bool] = None
	can_invite_users: Optional[bool] = None
	can_pin_messages: Optional[bool] = None
	can_manage_topics: Optional[bool] = None


class Location(TelegramModel) :
	longitude: float
	latitude: float
	horizontal_accuracy: Optional[float] = None
	"""Radius of uncertainty, in meters; 0-1500"""
	live_period: Optional[int] = None
	heading: Optional[int] = None
	proximity_alert_radius: Optional[int] = None


class ChatLocation(TelegramModel) :
	location: Location
	address: str


class ChatType(Enum) :
	sender: str = 'sender'
	private: str = 'private'
	group: str = 'group'
	supergroup: str = 'supergroup'
	channel: str = 'channel'


class Chat(TelegramModel) :
	id: ChatId
	type: ChatType
	title: Optional[str] = None
	"""For supergroups, channels and group chats"""
	username: Optional[str] = None
	first_name: Optional[str] = None
	last_name: Optional[str] = None
	is_forum: Optional[bool] = None
	# the rest are returned only by getChat
	photo: Optional[ChatPhoto] = None
	bio: Optional[str] = None
	description: Optional[str] = None
	invite_link: Optional[str] = None
	pinned_message: Optional['Message'] = None
	permissions: Optional[ChatPermissions] = None
	slow_mode_delay: Optional[int] = None
	message_auto_delete_time: Optional[int] = None
	has_protected_content: Optional[bool] = None
	sticker_set_name: Optional[str] = None
	can_set_sticker_set: Optional[bool] = None
	linked_chat_id: Optional[ChatId] = None
	location: Optional[ChatLocation] = None


class MessageEntityType(Enum) :
	mention: str = 'mention'
	hashtag: str = 'hashtag'
	cashtag: str = 'cashtag'
	bot_command: str = 'bot_command'
	url: str = 'url'
	email: str = 'email'
	phone_number: str = 'phone_number'
	bold: str = 'bold'
	italic: str = 'italic'
	underline: str = 'underline'
	strikethrough: str = 'strikethrough'
	spoiler: str = 'spoiler'
	blockquote: str = 'blockquote'
	expandable_blockquote: str = 'expandable_blockquote'
	code: str = 'code'
	pre: str = 'pre'
	text_link: str = 'text_link'
	text_mention: str = 'text_mention'
	custom_emoji: str = 'custom_emoji'


class MessageEntity(TelegramModel) :
	type: MessageEntityType
	offset: int
	"""Offset in UTF-16 code units to the start of the entity"""
	length: int
	"""Length of the entity in UTF-16 code units"""
	url: Optional[str] = None
	"""For 'text_link' only"""
	user: Optional[User] = None
	"""For 'text_mention' only"""
	language: Optional[str] = None
	"""For 'pre' only"""
	custom_emoji_id: Optional[str] = None


class PhotoSize(TelegramModel) :
	file_id: str
	file_unique_id: str
	width: int
	height: int
	file_size: Optional[int] = None


class UserProfilePhotos(TelegramModel) :
	total_count: int
	"""Total number of profile pictures the target user has"""
	photos: List[List[PhotoSize]]
	"""Requested profile pictures, each in up to 4 sizes"""


class Message(TelegramModel) :
	message_id: MessageId
	message_thread_id: Optional[int] = None
	from_user: Optional[User] = Field(None, alias='from')
	"""Sender of the message; empty for messages sent to channels"""
	sender_chat: Optional[Chat] = None
	date: UnixTime
	chat: Chat
	forward_from: Optional[User] = None
	forward_from_chat: Optional[Chat] = None
	forward_from_message_id: Optional[MessageId] = None
	forward_signature: Optional[str] = None
	forward_sender_name: Optional[str] = None
	forward_date: Optional[UnixTime] = None
	is_topic_message: Optional[bool] = None
	is_automatic_forward: Optional[bool] = None
	reply_to_message: Optional['Message'] = None
	"""Will not contain further reply_to_message fields even if it is itself a reply"""
	via_bot: Optional[User] = None
	edit_date: Optional[UnixTime] = None
	has_protected_content: Optional[bool] = None
	media_group_id: Optional[str] = None
	author_signature: Optional[str] = None
	text: Optional[str] = None
	entities: Optional[List[MessageEntity]] = None
	photo: Optional[List[PhotoSize]] = None
	caption: Optional[str] = None
	caption_entities: Optional[List[MessageEntity]] = None
	location: Optional[Location] = None
	new_chat_members: Optional[List[User]] = None
	left_chat_member: Optional[User] = None
	new_chat_title: Optional[str] = None
	new_chat_photo: Optional[List[PhotoSize]] = None
	delete_chat_photo: Optional[bool] = None
	group_chat_created: Optional[bool] = None
	supergroup_chat_created: Optional[bool] = None
	channel_chat_created: Optional[bool] = None
	migrate_to_chat_id: Optional[ChatId] = None
	migrate_from_chat_id: Optional[ChatId] = None
	pinned_message: Optional['Message'] = None
	connected_website: Optional[str] = None
	reply_markup: Optional[InlineKeyboardMarkup] = None
	"""login_url buttons are represented as ordinary url buttons"""


class CallbackQuery(TelegramModel) :
	id: str
	from_user: User = Field(alias='from')
	message: Optional[Message] = None
	"""Missing if the message is too old"""
	inline_message_id: Optional[str] = None
	chat_instance: str
	data: Optional[str] = None
	game_short_name: Optional[str] = None


class Update(TelegramModel) :
	"""
	at most one of the optional fields is present in any given update.
	update ids increase sequentially, getUpdates is acknowledged by passing the last seen id + 1 as offset.
	"""
	update_id: UpdateId
	message: Optional[Message] = None
	edited_message: Optional[Message] = None
	channel_post: Optional[Message] = None
	edited_channel_post: Optional[Message] = None
	callback_query: Optional[CallbackQuery] = None


class WebhookInfo(TelegramModel) :
	url: str
	"""Webhook URL, empty if no webhook is set up"""
	has_custom_certificate: bool
	pending_update_count: int
	ip_address: Optional[str] = None
	last_error_date: Optional[UnixTime] = None
	last_error_message: Optional[str] = None
	last_synchronization_error_date: Optional[UnixTime] = None
	max_connections: Optional[int] = None
	allowed_updates: Optional[List[str]] = None


class ResponseParameters(TelegramModel) :
	"""why a request failed, when telegram knows something the caller can act on"""
	migrate_to_chat_id: Optional[ChatId] = None
	"""The group has been migrated to a supergroup with this identifier"""
	retry_after: Optional[int] = None
	"""Seconds left to wait before the request can be repeated, when flood control was exceeded"""


################################################## CHAT MEMBER MODELS ##################################################


class ChatMemberOwner(TelegramModel) :
	status: Literal['creator'] = 'creator'
	user: User
	is_anonymous: bool
	custom_title: Optional[str] = None


class ChatMemberAdministrator(TelegramModel) :
	status: Literal['administrator'] = 'administrator'
	user: User
	can_be_edited: bool
	is_anonymous: bool
	can_manage_chat: bool
	can_delete_messages: bool
	can_manage_video_chats: bool
	can_restrict_members: bool
	can_promote_members: bool
	can_change_info: bool
	can_invite_users: bool
	can_post_messages: Optional[bool] = None
	can_edit_messages: Optional[bool] = None
	can_pin_messages: Optional[bool] = None
	can_manage_topics: Optional[bool] = None
	custom_title: Optional[str] = None


class ChatMemberMember(TelegramModel) :
	status: Literal['member'] = 'member'
	user: User


class ChatMemberRestricted(TelegramModel) :
	status: Literal['restricted'] = 'restricted'
	user: User
	is_member: bool
	can_send_messages: bool
	can_change_info: bool
	can_invite_users: bool
	can_pin_messages: bool
	until_date: UnixTime
	"""The epoch means restricted forever"""


class ChatMemberLeft(TelegramModel) :
	status: Literal['left'] = 'left'
	user: User


class ChatMemberBanned(TelegramModel) :
	status: Literal['kicked'] = 'kicked'
	user: User
	until_date: UnixTime
	"""The epoch means banned forever"""


# unlike reply markup, chat members carry an explicit tag
ChatMember = Annotated[
	Union[ChatMemberOwner, ChatMemberAdministrator, ChatMemberMember, ChatMemberRestricted, ChatMemberLeft, ChatMemberBanned],
	Field(discriminator='status'),
]


Chat.model_rebuild()
Message.model_rebuild()
