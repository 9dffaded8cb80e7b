# Copyright 2026 mfdicom authors. See LICENSE file for details.
