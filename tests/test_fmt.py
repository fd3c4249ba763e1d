import io

import pytest

from modwav.fmt import Fmt,UNKNOWN,classify,detect

@pytest.mark.parametrize('tag,nc',[
 (b'M.K.',4),(b'FLT4',4),(b'M!K!',4),(b'4CHN',4),(b'6CHN',6),
 (b'OCTA',8),(b'FLT8',8),(b'CD81',8),(b'8CHN',8)])
def test_known_tags(tag,nc):
 f=classify(tag)
 assert f.known and f.tag==tag.decode()
 assert (f.channels,f.instruments)==(nc,32)

@pytest.mark.parametrize('tag',[b'xxxx',b'2CHN',b'16CH',b'\x00\x00\x00\x00',b'M.K'])
def test_unknown_tags(tag):
 f=classify(tag)
 assert f==UNKNOWN and not f.known
 assert (f.tag,f.channels,f.instruments)==('',4,16)

def test_detect_rewinds():
 f=io.BytesIO(bytes(1080)+b'6CHN'+bytes(10))
 f.seek(7)
 assert detect(f)==Fmt('6CHN',6,32)
 assert f.tell()==0

def test_detect_short_source():
 f=io.BytesIO(bytes(1082))
 assert detect(f)==UNKNOWN
 assert f.tell()==0
