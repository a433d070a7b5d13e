"""skicka-deploy: compile and install a systemd deployment of the skicka file-transfer tool."""
