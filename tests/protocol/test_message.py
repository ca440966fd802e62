import pytest
import specialremote


def test_message():

    message = specialremote.protocol.Message('TRANSFER-SUCCESS', 'STORE', 'k1')
    assert message.encode() == 'TRANSFER-SUCCESS STORE k1\n'
    assert str(message) == 'TRANSFER-SUCCESS STORE k1'

    # The encoded line is cached.
    assert message.encode() is message.encode()


def test_message_sanitized():

    message = specialremote.protocol.Message('ERROR', 'line one\nline two')
    assert message.encode() == 'ERROR line oneline two\n'


def test_version():

    message = specialremote.protocol.message.version()
    assert message.encode() == 'VERSION 1\n'


def test_command():

    command = specialremote.protocol.Command.parse('TRANSFER RETRIEVE k1 /tmp/f1')
    assert command.verb == 'TRANSFER'
    assert command.arguments == ('RETRIEVE', 'k1', '/tmp/f1')
    assert len(command) == 3

    command.require(3)

    with pytest.raises(specialremote.FramingError) as raised:
        command.require(4)

    assert str(raised.value) == 'less than 5 fields in TRANSFER'


def test_command_remainder():

    command = specialremote.protocol.Command.parse('ERROR it  all went wrong')
    assert command.remainder == 'it  all went wrong'

    command = specialremote.protocol.Command.parse('ERROR')
    assert command.remainder == ''


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
