import logging
import random
import unittest

import isaac


__all__ = ['isaac', 'TestBase']


class TestBase(unittest.TestCase):

    def generate_random_buffer(self, size):
        return bytes(random.randrange(0, 0x100) for _ in range(size))

    def generate_random_words(self, count, bits=32):
        return [random.getrandbits(bits) for _ in range(count)]

    def seeded(self, family, material=None):
        generator = family()
        generator.seed(material)
        return generator

    def setUp(self):
        random.seed(0xBAADF00D)  # guarantee deterministic 'random' buffers
        logging.disable(logging.CRITICAL)

    def tearDown(self):
        logging.disable(logging.NOTSET)

    def assertContains(self, container, member, msg=None):
        self.assertIn(member, container, msg)
