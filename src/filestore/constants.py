APP_NAME = "filestore"
