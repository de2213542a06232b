"""dotinstall API - command functions returning StageResult."""
