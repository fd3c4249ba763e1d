"""modwav - render MOD tracker modules to WAV."""
from .errors import ModError,Truncated,SizeMismatch,Diag
from .fmt import Fmt,detect
from .mod import Module,Inst,Pattern,Note,load,encode,encode_note,decode_note,expected_size
from .seq import Sequencer,Line
from .resample import resample,Cache
from .wav import Wav
from .mix import Mixer,Render,render

__version__='0.9.0'
