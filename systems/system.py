class System:
    def setup(self):
        pass

    def run(self, *args, **kwargs):
        raise NotImplementedError(f"Child system MUST implement {self.run.__name__}")
