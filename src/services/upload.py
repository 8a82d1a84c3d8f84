from models.schemas import UploadInput, UploadResult


class UploadService:
    def upload(self, file: UploadInput) -> UploadResult:
        """
        Acknowledge an upload.
        No bytes are read or stored; the declared name is echoed back.
        """
        return UploadResult(filename=file.originalname, status="uploaded")
