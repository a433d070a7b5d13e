"""skicka-deploy API - command functions returning StageResult objects."""
