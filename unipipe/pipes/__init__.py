"""Ready-made pipes: chunking and offset-based windowing."""