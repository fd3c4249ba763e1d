import numpy as np

from conftest import make,tone
from modwav.resample import Cache,_s8f,frame_count,resample

RAW=bytes((10,200,127,128))

def test_sign_and_scale():
 v=_s8f(bytes((127,128,0,255)))
 assert v.dtype==np.float32
 assert list(v)==[32767/32768,-1.0,128/32768,-129/32768]

def test_frame_count():
 assert frame_count(4,428)==21
 assert frame_count(4,444)==22
 assert frame_count(4,428,22050)==11
 assert frame_count(0,428)==0

def test_endpoints_exact():
 d=_s8f(RAW)
 w=resample(RAW,428)
 assert w.shape==(21,2) and w.dtype==np.float32
 assert w[0,0]==d[0] and w[0,1]==d[0]
 assert w[-1,0]==d[-1] and w[-1,1]==d[-1]

def test_integer_source_index_is_exact():
 # 22 frames over 4 samples: frames 7 and 14 land on samples 1 and 2
 d=_s8f(RAW)
 w=resample(RAW,444)
 assert len(w)==22
 assert w[7,0]==d[1] and w[14,0]==d[2]

def test_linear_between_samples():
 raw=bytes((0,64))
 d=_s8f(raw)
 w=resample(raw,428,rate=3*3563219//(2*428)+1)
 assert len(w)==3
 np.testing.assert_allclose(w[1,0],(d[0]+d[1])/2,rtol=1e-6)

def test_higher_pitch_is_shorter():
 assert len(resample(bytes(100),214))<len(resample(bytes(100),428))

def test_cache_computes_once():
 m=make(insts={1:tone(RAW)})
 c=Cache(m)
 w=c.get(1,428)
 assert c.get(1,428) is w
 assert (1,428) in c and len(c)==1
 c.get(1,214)
 assert len(c)==2

def test_cache_blank_slot_is_empty():
 c=Cache(make())
 assert c.get(2,428).shape==(0,2)
