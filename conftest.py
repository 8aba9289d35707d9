import os

# Pas d'eventlet pendant les tests : threads classiques
os.environ['ASYNC_MODE'] = 'threading'

import pytest

from progression import ProgressionTable, Tier


class FakeClock:
    """Remplace start_background_task / sleep de Flask-SocketIO"""

    def __init__(self):
        self.tasks = []
        self.sleeps = 0
        self.on_sleep = None

    def start_task(self, target):
        self.tasks.append(target)

    def sleep(self, seconds):
        self.sleeps += 1
        if self.on_sleep:
            self.on_sleep(self.sleeps)


class RecordingView:
    def __init__(self):
        self.images = []
        self.texts = []
        self.messages = []

    def set_image(self, image_id):
        self.images.append(image_id)

    def set_text(self, revenue, units_sold):
        self.texts.append((revenue, units_sold))

    def notify(self, message):
        self.messages.append(message)


class RecordingShare:
    def __init__(self):
        self.sent = []

    def send(self, text, mime_type):
        self.sent.append((text, mime_type))


@pytest.fixture
def scenario_table():
    return ProgressionTable([
        Tier('imgA', 5, 0),
        Tier('imgB', 10, 5),
        Tier('imgC', 15, 20)
    ])


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def view():
    return RecordingView()


@pytest.fixture
def share_target():
    return RecordingShare()
