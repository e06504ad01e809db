from datetime import datetime, timezone
from typing import List

import pytest
import ujson

from tg_methods.exceptions import ApiError, MalformedResponse
from tg_methods.methods import DeleteMessage, EditMessageReplyMarkup, GetChatAdministrators, GetChatMembersCount, GetMe, GetUpdates, GetWebhookInfo, SendMessage
from tg_methods.models.telegram import ChatMemberAdministrator, ChatMemberOwner, ChatType, Message, MessageEntityType, Update, User
from tg_methods.response import TelegramResult, decode_response


def createTelegramMessage(message_id: int = 123, text: str = '/start') -> dict :
	return {
		'message_id': message_id,
		'date': 1700000000,
		'from': {
			'id': 1,
			'first_name': 'test',
			'is_bot': False,
		},
		'chat': {
			'id': 1,
			'type': 'private',
		},
		'text': text,
		'entities': [
			{
				'offset': 0,
				'length': len(text),
				'type': 'bot_command',
			},
		],
	}


class TestEnvelope :

	def test_Decode_OkWithResult_Success(self) :
		# act
		result = decode_response(bool, b'{"ok":true,"result":true}')

		# assert
		assert result is True


	def test_Decode_OkWithModelResult_TypedSuccess(self) :
		# act
		result = GetMe.decode({ 'ok': True, 'result': { 'id': 42, 'is_bot': True, 'first_name': 'bot', 'username': 'a_bot' } })

		# assert
		assert User(id=42, is_bot=True, first_name='bot', username='a_bot') == result


	def test_Decode_NotOk_ApiError(self) :
		# act
		result = decode_response(bool, '{"ok":false,"description":"d","error_code":1}')

		# assert
		assert ApiError(1, 'd') == result
		assert isinstance(result, ApiError)
		assert 1 == result.error_code
		assert 'd' == result.description


	def test_Decode_NotOkWithoutDetails_DefaultCodeAndDescription(self) :
		# act
		result = decode_response(bool, { 'ok': False })

		# assert
		assert ApiError(0, '') == result


	def test_Decode_NotOkWithResult_StillApiError(self) :
		# act
		result = decode_response(bool, { 'ok': False, 'result': 'not even a bool', 'error_code': 400, 'description': 'Bad Request' })

		# assert
		assert ApiError(400, 'Bad Request') == result


	def test_Decode_NotOkWithParameters_ParametersKept(self) :
		# act
		result = decode_response(bool, { 'ok': False, 'error_code': 429, 'description': 'Too Many Requests: retry after 5', 'parameters': { 'retry_after': 5 } })

		# assert
		assert 5 == result.parameters.retry_after
		assert result.parameters.migrate_to_chat_id is None


	def test_Decode_OkWithoutResult_MalformedResponse(self) :
		with pytest.raises(MalformedResponse) :
			decode_response(bool, b'{"ok":true}')


	def test_Decode_OkWithNullResult_MalformedResponse(self) :
		with pytest.raises(MalformedResponse) :
			decode_response(User, { 'ok': True, 'result': None })


	def test_Decode_OkWithFalseResult_FalseReturned(self) :
		assert DeleteMessage.decode({ 'ok': True, 'result': False }) is False


	@pytest.mark.parametrize(
		'raw',
		[b'', b'not json', b'[1, 2]', b'"ok"', b'null', b'{"result":true}', b'{"ok":"maybe"}', b'{"ok":true,"result":{"id":"x"}}'],
	)
	def test_Decode_BadEnvelope_MalformedResponse(self, raw) :
		with pytest.raises(MalformedResponse) :
			GetMe.decode(raw)


	def test_Decode_InvalidResultField_MalformedResponse(self) :
		# arrange
		message = createTelegramMessage()
		message['reply_markup'] = { 'unknown': [] }

		# act & assert
		with pytest.raises(MalformedResponse) :
			SendMessage.decode({ 'ok': True, 'result': message })


	def test_ErrorCodeField_OnlyDocumentedNameRead(self) :
		# act
		result = decode_response(bool, { 'ok': False, 'err_code': 5, 'description': 'd' })

		# assert
		assert 0 == result.error_code


	def test_ApiError_Str_CodeAndDescription(self) :
		assert '[ERROR 403] Forbidden: bot was blocked by the user' == str(ApiError(403, 'Forbidden: bot was blocked by the user'))


	@pytest.mark.parametrize(
		'envelope',
		[
			{ 'ok': 'true', 'result': True },
			{ 'ok': 'yes', 'result': True },
			{ 'ok': 'on', 'result': True },
			{ 'ok': 1, 'result': True },
			{ 'ok': 0, 'result': 'garbage' },
			{ 'ok': 0, 'error_code': 400, 'description': 'Bad Request' },
			{ 'ok': None, 'result': True },
		],
	)
	def test_Decode_NonBooleanOk_MalformedResponse(self, envelope) :
		with pytest.raises(MalformedResponse) :
			decode_response(bool, envelope)


	@pytest.mark.parametrize(
		'method, result',
		[
			(DeleteMessage, 'yes'),
			(DeleteMessage, 1),
			(GetChatMembersCount, '42'),
			(GetChatMembersCount, True),
			(EditMessageReplyMarkup, 'true'),
		],
	)
	def test_Decode_CoercibleScalarResult_MalformedResponse(self, method, result) :
		with pytest.raises(MalformedResponse) :
			method.decode({ 'ok': True, 'result': result })


	def test_Decode_IntResult_Int(self) :
		assert 42 == GetChatMembersCount.decode(b'{"ok":true,"result":42}')


class TestResults :

	def test_Decode_GetUpdates_ListOfUpdates(self) :
		# arrange
		raw = ujson.dumps({
			'ok': True,
			'result': [
				{ 'update_id': 10, 'message': createTelegramMessage(1) },
				{ 'update_id': 11, 'edited_message': createTelegramMessage(2, '/help') },
			],
		})

		# act
		result: List[Update] = GetUpdates.decode(raw)

		# assert
		assert [10, 11] == [u.update_id for u in result]
		assert 1 == result[0].message.from_user.id
		assert ChatType.private == result[0].message.chat.type
		assert MessageEntityType.bot_command == result[1].edited_message.entities[0].type
		assert datetime(2023, 11, 14, 22, 13, 20, tzinfo=timezone.utc) == result[0].message.date


	def test_Decode_EmptyUpdates_EmptyList(self) :
		assert [] == GetUpdates.decode(b'{"ok":true,"result":[]}')


	def test_Decode_WebhookInfo_Typed(self) :
		# act
		result = GetWebhookInfo.decode({ 'ok': True, 'result': { 'url': '', 'has_custom_certificate': False, 'pending_update_count': 3 } })

		# assert
		assert 3 == result.pending_update_count
		assert result.last_error_date is None


	def test_Decode_ChatAdministrators_TaggedByStatus(self) :
		# arrange
		user = { 'id': 1, 'is_bot': False, 'first_name': 'a' }
		admin = {
			'status': 'administrator',
			'user': user,
			'can_be_edited': False,
			'is_anonymous': False,
			'can_manage_chat': True,
			'can_delete_messages': True,
			'can_manage_video_chats': False,
			'can_restrict_members': True,
			'can_promote_members': False,
			'can_change_info': True,
			'can_invite_users': True,
		}

		# act
		result = GetChatAdministrators.decode({ 'ok': True, 'result': [{ 'status': 'creator', 'user': user, 'is_anonymous': False }, admin] })

		# assert
		assert isinstance(result[0], ChatMemberOwner)
		assert isinstance(result[1], ChatMemberAdministrator)


	def test_Decode_EditReplyMarkupInline_True(self) :
		assert EditMessageReplyMarkup.decode({ 'ok': True, 'result': True }) is True


	def test_Decode_EditReplyMarkupMessage_Message(self) :
		assert isinstance(EditMessageReplyMarkup.decode({ 'ok': True, 'result': createTelegramMessage() }), Message)


	def test_RoundTrip_Message_ValueUnchanged(self) :
		# arrange
		message = createTelegramMessage()
		message['reply_to_message'] = createTelegramMessage(122, '/help')
		message['reply_markup'] = { 'inline_keyboard': [[{ 'text': 'a', 'callback_data': 'b' }]] }
		decoded: Message = SendMessage.decode({ 'ok': True, 'result': message })

		# act
		result = SendMessage.decode({ 'ok': True, 'result': decoded.model_dump(mode='json', by_alias=True, exclude_none=True) })

		# assert
		assert decoded == result
		assert 1 == result.from_user.id


	def test_Encode_MessageDates_UnixTimestamps(self) :
		# arrange
		message = createTelegramMessage()
		message['edit_date'] = 1700000060
		decoded: Message = SendMessage.decode({ 'ok': True, 'result': message })

		# act
		result = decoded.model_dump(mode='json', by_alias=True, exclude_none=True)

		# assert
		assert 1700000000 == result['date']
		assert 1700000060 == result['edit_date']
		assert datetime(2023, 11, 14, 22, 13, 20, tzinfo=timezone.utc) == decoded.model_dump()['date']


	def test_Encode_WebhookInfoErrorDate_UnixTimestamp(self) :
		# arrange
		info = GetWebhookInfo.decode({ 'ok': True, 'result': { 'url': 'https://example.com', 'has_custom_certificate': False, 'pending_update_count': 0, 'last_error_date': 1600000000 } })

		# act
		result = info.model_dump(mode='json', exclude_none=True)

		# assert
		assert 1600000000 == result['last_error_date']


	def test_Envelope_Generic_ParametrizedByResultType(self) :
		# act
		envelope = TelegramResult[User].model_validate({ 'ok': True, 'result': { 'id': 1, 'is_bot': False, 'first_name': 'a' } })

		# assert
		assert isinstance(envelope.result, User)
		assert envelope.outcome() is envelope.result
