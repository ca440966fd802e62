#!/usr/bin/env python3
""" This is an implementation of a special remote that keeps content in a
    plain directory, enabling the large-file tool to store and retrieve
    content anywhere a path can reach: a USB drive, a network mount, etc.

    The directory is chosen when the remote is first set up, for example:

        initremote mydir type=external externaltype=directory directory=/mnt/usb
"""

import os
import shutil

import specialremote


class Handler(specialremote.Handler):

    def __init__(self):
        self.directory = None


    def init_remote(self, session):

        directory = session.get_config('directory')

        if directory == '':
            return specialremote.Failure('you need to set directory=')

        os.makedirs(directory, exist_ok=True)


    def prepare(self, session):

        directory = session.get_config('directory')

        if not os.path.isdir(directory):
            return specialremote.Failure('%s does not exist' % (directory))

        self.directory = directory


    def location(self, session, key):
        """ Content is spread across subdirectories the same way the peer
            lays out its own object store.
        """

        hashdir = session.dir_hash(key)
        return os.path.join(self.directory, hashdir, key)


    def store(self, session, key, path):

        target = self.location(session, key)
        os.makedirs(os.path.dirname(target), exist_ok=True)
        partial = target + '.partial'

        with open(path, 'rb') as source:
            reader = specialremote.ProgressReader(source, session)
            with open(partial, 'wb') as destination:
                shutil.copyfileobj(reader, destination)

        os.replace(partial, target)


    def retrieve(self, session, key, path):

        source_path = self.location(session, key)

        with open(source_path, 'rb') as source:
            reader = specialremote.ProgressReader(source, session)
            with open(path, 'wb') as destination:
                shutil.copyfileobj(reader, destination)


    def remove(self, session, key):

        try:
            os.remove(self.location(session, key))
        except FileNotFoundError:
            pass


    def check_present(self, session, key):
        return os.path.exists(self.location(session, key))


    def get_availability(self, session):
        return specialremote.Availability.LOCAL


    def where_is(self, session, key):

        target = self.location(session, key)

        if os.path.exists(target):
            return target

        return ''


# end of class Handler



if __name__ == '__main__':
    state = specialremote.run(Handler())
    raise SystemExit(0 if state == specialremote.State.CLOSED else 1)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
