from logging.handlers import BufferingHandler

class LogCapture(BufferingHandler):
    def __init__(self):
        BufferingHandler.__init__(self, 0)

    def shouldFlush(self):
        return False

    def emit(self, record):
        self.buffer.append(record.msg)
