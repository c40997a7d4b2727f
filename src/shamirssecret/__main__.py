# SPDX-FileCopyrightText: 2025 ShamirsSecret contributors
# SPDX-License-Identifier: MIT

from .cli import main

if __name__ == "__main__":
    main()
