import numpy as np
import pytest

from modwav.wav import Wav

def test_frames_and_samples():
 w=Wav(10)
 assert w.frame_count()==10 and len(w)==10
 w.set(3,0.5,-0.25)
 assert w.get(3)==(0.5,-0.25)
 assert w.get(4)==(0.0,0.0)

def test_grow_keeps_data():
 w=Wav(4);w.set(1,0.5,0.5)
 w.grow(3)
 assert len(w)==4
 w.grow(5)
 assert len(w)==8 and w.get(1)==(0.5,0.5)

def test_add_offset_gain_balance():
 src=Wav.of(np.ones((4,2)))
 dst=Wav(6)
 dst.add(1,src,1,10,0.5,0.0)
 assert dst.get(0)==(0.0,0.0)
 assert dst.get(1)==(0.5,0.5) and dst.get(3)==(0.5,0.5)
 assert dst.get(4)==(0.0,0.0)
 dst=Wav(2)
 dst.add(0,src,0,2,1.0,0.5)
 assert dst.get(0)==(0.5,1.0)
 dst.add(0,src,0,2,1.0,-1.0)
 assert dst.get(1)==(1.5,1.0)

def test_save_and_load(tmp_path):
 w=Wav(100,rate=22050)
 w.data[:,0]=np.linspace(-0.5,0.5,100);w.data[:,1]=0.25
 w.data[0]=(2.0,-2.0)
 p=tmp_path/'x.wav'
 w.save(p)
 back=Wav.load(p)
 assert back.rate==22050 and back.frame_count()==100
 assert back.get(0)==pytest.approx((1.0,-1.0),abs=1e-4)
 np.testing.assert_allclose(back.data[1:],w.data[1:],atol=1e-4)
