# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# SPDX-License-Identifier: MIT
#

from aidlink.app import create_app
from aidlink.storage.memory import MemStorage

# The store lives as long as this process; swap MemStorage for a durable Storage here.
app = create_app(storage=MemStorage())
